from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from core.utils import now_brazil_naive
from modules.sla.repository import SlaRepository
from modules.sla.verificador import VerificadorPrazos, montar_mensagem_expiracao
from ti.models import Notificacao


def _notificacoes(db):
    db.expire_all()
    return db.query(Notificacao).all()


def test_overdue_open_ticket_notified_once(db, criar_chamado, prazo_vencido):
    chamado = criar_chamado(data_prazo=prazo_vencido, status="Aberto")
    verificador = VerificadorPrazos(db)

    primeiro = verificador.verificar_chamados_expirados()
    segundo = verificador.verificar_chamados_expirados()

    assert primeiro.chamados_verificados == 1
    assert primeiro.notificacoes_enviadas == 1
    assert segundo.chamados_verificados == 1
    assert segundo.notificacoes_enviadas == 0

    notificacoes = _notificacoes(db)
    assert len(notificacoes) == 1
    assert notificacoes[0].chamado_id == chamado.id
    assert notificacoes[0].user_id == chamado.user_id
    assert notificacoes[0].visualizada is False


@pytest.mark.parametrize("status", ["Fechado", "Encerrado", "fechado", "encerrado", "FECHADO", " Encerrado "])
def test_terminal_status_never_notified(db, criar_chamado, prazo_vencido, status):
    criar_chamado(data_prazo=prazo_vencido, status=status)
    verificador = VerificadorPrazos(db)

    for _ in range(3):
        resultado = verificador.verificar_chamados_expirados()
        assert resultado.chamados_verificados == 0
        assert resultado.notificacoes_enviadas == 0

    assert _notificacoes(db) == []


def test_ticket_without_deadline_is_not_selected(db, criar_chamado):
    criar_chamado(data_prazo=None)
    repo = SlaRepository(db)

    assert repo.listar_chamados_expirados(now_brazil_naive()) == []
    assert VerificadorPrazos(db).verificar_chamados_expirados().chamados_verificados == 0


def test_future_deadline_is_not_selected(db, criar_chamado):
    criar_chamado(data_prazo=now_brazil_naive() + timedelta(days=1))
    assert VerificadorPrazos(db).verificar_chamados_expirados().chamados_verificados == 0


def test_read_notification_does_not_block_new_one(db, criar_chamado, prazo_vencido):
    chamado = criar_chamado(data_prazo=prazo_vencido)
    repo = SlaRepository(db)
    antiga = repo.criar_notificacao(chamado.user_id, chamado.id, "antiga")
    antiga.visualizada = True
    db.commit()

    resultado = VerificadorPrazos(db).verificar_chamados_expirados()

    assert resultado.notificacoes_enviadas == 1
    assert len(_notificacoes(db)) == 2


def test_existing_unread_notification_is_kept(db, criar_chamado, prazo_vencido):
    chamado = criar_chamado(data_prazo=prazo_vencido)
    SlaRepository(db).criar_notificacao(chamado.user_id, chamado.id, "pendente")

    resultado = VerificadorPrazos(db).verificar_chamados_expirados()

    assert resultado.chamados_verificados == 1
    assert resultado.notificacoes_enviadas == 0
    assert [n.mensagem for n in _notificacoes(db)] == ["pendente"]


def test_sweep_does_not_mutate_tickets(db, criar_chamado, prazo_vencido):
    chamado = criar_chamado(data_prazo=prazo_vencido, status="Em andamento")

    VerificadorPrazos(db).verificar_chamados_expirados()

    db.expire_all()
    assert chamado.status == "Em andamento"
    assert chamado.data_prazo == prazo_vencido
    assert chamado.data_fechamento is None


def test_message_uses_ticket_number_or_short_id(criar_chamado, prazo_vencido):
    com_numero = criar_chamado(data_prazo=prazo_vencido, numero_chamado="CH-0042", titulo="VPN fora")
    sem_numero = criar_chamado(data_prazo=prazo_vencido, titulo="Sem acesso")

    assert montar_mensagem_expiracao(com_numero) == (
        'PRAZO EXPIRADO: O chamado "VPN fora" (CH-0042) ultrapassou o prazo de 72h úteis. '
        "Por favor, atualize o status."
    )
    assert f"({sem_numero.id[:8]})" in montar_mensagem_expiracao(sem_numero)
    assert '"Sem acesso"' in montar_mensagem_expiracao(sem_numero)


def test_failure_on_one_ticket_does_not_stop_others(db, criar_chamado, prazo_vencido):
    primeiro = criar_chamado(data_prazo=prazo_vencido - timedelta(hours=5))
    segundo = criar_chamado(data_prazo=prazo_vencido, user_id="user-2")

    class RepositorioInstavel(SlaRepository):
        def criar_notificacao(self, user_id, chamado_id, mensagem):
            if chamado_id == primeiro.id:
                raise OperationalError("INSERT", {}, Exception("database is locked"))
            return super().criar_notificacao(user_id, chamado_id, mensagem)

    resultado = VerificadorPrazos(db, RepositorioInstavel(db)).verificar_chamados_expirados()

    assert resultado.chamados_verificados == 2
    assert resultado.notificacoes_enviadas == 1
    assert resultado.falhas == 1
    assert [n.chamado_id for n in _notificacoes(db)] == [segundo.id]


def test_query_failure_propagates(db):
    class RepositorioQuebrado(SlaRepository):
        def listar_chamados_expirados(self, agora):
            raise OperationalError("SELECT", {}, Exception("no such table"))

    with pytest.raises(OperationalError):
        VerificadorPrazos(db, RepositorioQuebrado(db)).verificar_chamados_expirados()


def test_each_owner_gets_own_notification(db, criar_chamado, prazo_vencido):
    criar_chamado(data_prazo=prazo_vencido, user_id="user-1")
    criar_chamado(data_prazo=prazo_vencido, user_id="user-2")

    resultado = VerificadorPrazos(db).verificar_chamados_expirados()

    assert resultado.notificacoes_enviadas == 2
    assert sorted(n.user_id for n in _notificacoes(db)) == ["user-1", "user-2"]
