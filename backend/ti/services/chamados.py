"""Camada de negócio para chamados"""
from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.utils import now_brazil_naive
from modules.sla.calendario import calcular_prazo, get_end_of_day, get_start_of_day
from modules.sla.constants import STATUS_INICIAL, is_status_finalizado
from ti.models import AcaoLog, Chamado, ChamadoLink, Resposta
from ti.schemas.chamado import AnotacoesUpdate, ChamadoCreate, ChamadoUpdate, LinkCreate, RespostaCreate
from .auditoria import registrar_alteracoes, registrar_log
from .exceptions import ChamadoNaoEncontradoError, LinkNaoEncontradoError, NumeroChamadoDuplicadoError

logger = logging.getLogger("ti.services.chamados")

CAMPOS_EDITAVEIS = ("titulo", "descricao_usuario", "status", "nivel", "estruturante", "numero_chamado")


def obter_chamado(db: Session, chamado_id: str) -> Chamado:
    ch = db.query(Chamado).filter(Chamado.id == chamado_id).first()
    if not ch:
        raise ChamadoNaoEncontradoError(chamado_id)
    return ch


def _garantir_numero_livre(db: Session, numero_chamado: Optional[str], chamado_id: Optional[str] = None) -> None:
    if not numero_chamado:
        return
    query = db.query(Chamado.id).filter(Chamado.numero_chamado == numero_chamado)
    if chamado_id:
        query = query.filter(Chamado.id != chamado_id)
    if query.first():
        raise NumeroChamadoDuplicadoError(numero_chamado)


def _commit(db: Session, numero_chamado: Optional[str] = None) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if numero_chamado:
            raise NumeroChamadoDuplicadoError(numero_chamado)
        raise


def listar_chamados(
    db: Session,
    busca: Optional[str] = None,
    status: Optional[str] = None,
    nivel: Optional[int] = None,
    estruturante: Optional[str] = None,
    data_inicio: Optional[date] = None,
    data_fim: Optional[date] = None,
) -> list[Chamado]:
    """
    Lista chamados com filtros opcionais.

    - busca: trecho do id, número ou título (sem diferenciar maiúsculas)
    - data_inicio/data_fim: dias inteiros (início 00:00, fim 23:59:59.999999)
    """
    query = db.query(Chamado)

    if busca and busca.strip():
        termo = f"%{busca.strip().lower()}%"
        query = query.filter(or_(
            func.lower(Chamado.id).like(termo),
            func.lower(Chamado.numero_chamado).like(termo),
            func.lower(Chamado.titulo).like(termo),
        ))
    if status:
        query = query.filter(Chamado.status == status)
    if nivel is not None:
        query = query.filter(Chamado.nivel == nivel)
    if estruturante:
        query = query.filter(Chamado.estruturante == estruturante)
    if data_inicio:
        query = query.filter(Chamado.data_criacao >= get_start_of_day(data_inicio))
    if data_fim:
        query = query.filter(Chamado.data_criacao <= get_end_of_day(data_fim))

    return query.order_by(Chamado.data_criacao.desc()).all()


def criar_chamado(db: Session, payload: ChamadoCreate) -> Chamado:
    """Cria chamado em 'Aberto' com prazo de 72 horas úteis"""
    numero = (payload.numero_chamado or "").strip() or None
    _garantir_numero_livre(db, numero)

    agora = now_brazil_naive()
    ch = Chamado(
        numero_chamado=numero,
        titulo=payload.titulo,
        nivel=payload.nivel,
        estruturante=payload.estruturante,
        descricao_usuario=payload.descricao_usuario,
        user_id=payload.user_id,
        status=STATUS_INICIAL,
        data_criacao=agora,
        data_prazo=calcular_prazo(agora),
    )
    db.add(ch)
    db.flush()
    registrar_log(db, ch.id, payload.user_id, AcaoLog.CREATED)
    _commit(db, numero)
    db.refresh(ch)

    logger.info(f"Chamado {ch.identificador} criado (prazo: {ch.data_prazo.isoformat()})")
    return ch


def atualizar_chamado(db: Session, chamado_id: str, payload: ChamadoUpdate) -> Chamado:
    """
    Atualiza campos do chamado registrando um log por campo alterado.

    - nível maior: encaminhamento, prazo recalculado a partir de agora
    - entrada em status final: data_fechamento gravada uma única vez
    """
    ch = obter_chamado(db, chamado_id)
    dados = payload.model_dump(exclude_unset=True, exclude={"user_id"})
    alteracoes = {campo: dados[campo] for campo in CAMPOS_EDITAVEIS if campo in dados}

    if "numero_chamado" in alteracoes:
        alteracoes["numero_chamado"] = (alteracoes["numero_chamado"] or "").strip() or None
        _garantir_numero_livre(db, alteracoes["numero_chamado"], ch.id)

    # campos obrigatórios não aceitam null
    alteracoes = {
        campo: valor for campo, valor in alteracoes.items()
        if valor is not None or campo == "numero_chamado"
    }

    anteriores = {campo: getattr(ch, campo) for campo in alteracoes}
    alteracoes = {campo: valor for campo, valor in alteracoes.items() if anteriores[campo] != valor}
    if not alteracoes:
        return ch

    agora = now_brazil_naive()
    for campo, valor in alteracoes.items():
        setattr(ch, campo, valor)

    if "nivel" in alteracoes and alteracoes["nivel"] > anteriores["nivel"]:
        ch.data_encaminhamento = agora
        ch.nivel_encaminhamento = alteracoes["nivel"]
        ch.data_prazo = calcular_prazo(agora)
        logger.info(f"Chamado {ch.identificador} encaminhado para o nível {ch.nivel}")

    if (
        "status" in alteracoes
        and is_status_finalizado(alteracoes["status"])
        and not is_status_finalizado(anteriores["status"])
        and ch.data_fechamento is None
    ):
        ch.data_fechamento = agora

    ch.last_edited_at = agora
    ch.last_edited_by = payload.user_id

    registrar_alteracoes(db, ch.id, payload.user_id, alteracoes, anteriores)
    _commit(db, alteracoes.get("numero_chamado"))
    db.refresh(ch)
    return ch


def atualizar_anotacoes(db: Session, chamado_id: str, payload: AnotacoesUpdate) -> Chamado:
    ch = obter_chamado(db, chamado_id)
    anterior = ch.anotacoes_internas
    if anterior == payload.anotacoes_internas:
        return ch

    ch.anotacoes_internas = payload.anotacoes_internas
    ch.last_edited_at = now_brazil_naive()
    ch.last_edited_by = payload.user_id
    registrar_log(
        db, ch.id, payload.user_id, AcaoLog.NOTES_UPDATED,
        "anotacoes_internas", anterior, payload.anotacoes_internas,
    )
    db.commit()
    db.refresh(ch)
    return ch


def deletar_chamado(db: Session, chamado_id: str, user_id: str) -> None:
    """Remove o chamado e dependentes; o histórico é mantido"""
    ch = obter_chamado(db, chamado_id)
    registrar_log(db, ch.id, user_id, AcaoLog.DELETED, valor_antigo=ch.titulo)
    db.delete(ch)
    db.commit()
    logger.info(f"Chamado {chamado_id} excluído por {user_id}")


# ==================== Respostas ====================

def listar_respostas(db: Session, chamado_id: str) -> list[Resposta]:
    obter_chamado(db, chamado_id)
    return db.query(Resposta).filter(
        Resposta.chamado_id == chamado_id
    ).order_by(Resposta.data_criacao.asc()).all()


def adicionar_resposta(db: Session, chamado_id: str, payload: RespostaCreate) -> Resposta:
    ch = obter_chamado(db, chamado_id)
    resposta = Resposta(
        chamado_id=ch.id,
        user_id=payload.user_id,
        conteudo=payload.conteudo,
        tipo=payload.tipo,
    )
    db.add(resposta)
    registrar_log(db, ch.id, payload.user_id, AcaoLog.RESPONSE_ADDED, valor_novo=payload.conteudo)
    db.commit()
    db.refresh(resposta)
    return resposta


# ==================== Links ====================

def listar_links(db: Session, chamado_id: str) -> list[ChamadoLink]:
    obter_chamado(db, chamado_id)
    return db.query(ChamadoLink).filter(
        ChamadoLink.chamado_id == chamado_id
    ).order_by(ChamadoLink.created_at.asc()).all()


def adicionar_link(db: Session, chamado_id: str, payload: LinkCreate) -> ChamadoLink:
    ch = obter_chamado(db, chamado_id)
    link = ChamadoLink(chamado_id=ch.id, nome=payload.nome, url=payload.url, user_id=payload.user_id)
    db.add(link)
    registrar_log(db, ch.id, payload.user_id, AcaoLog.LINK_ADDED, "link", None, f"{payload.nome}: {payload.url}")
    db.commit()
    db.refresh(link)
    return link


def remover_link(db: Session, chamado_id: str, link_id: str, user_id: str) -> None:
    link = db.query(ChamadoLink).filter(
        ChamadoLink.id == link_id,
        ChamadoLink.chamado_id == chamado_id,
    ).first()
    if not link:
        raise LinkNaoEncontradoError(link_id)
    registrar_log(db, chamado_id, user_id, AcaoLog.LINK_REMOVED, "link", f"{link.nome}: {link.url}", None)
    db.delete(link)
    db.commit()
