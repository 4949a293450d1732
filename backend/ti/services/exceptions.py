"""Exceções customizadas do módulo de chamados"""


class ChamadoException(Exception):
    """Exceção base do módulo de chamados"""
    pass


class ChamadoNaoEncontradoError(ChamadoException):
    """Erro quando chamado não é encontrado"""
    def __init__(self, chamado_id: str):
        self.chamado_id = chamado_id
        super().__init__(f"Chamado {chamado_id} não encontrado")


class NumeroChamadoDuplicadoError(ChamadoException):
    """Erro quando o número do chamado já está em uso"""
    def __init__(self, numero_chamado: str):
        self.numero_chamado = numero_chamado
        super().__init__(f"Já existe chamado com o número '{numero_chamado}'")


class LinkNaoEncontradoError(ChamadoException):
    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__(f"Link {link_id} não encontrado")


class NotificacaoNaoEncontradaError(ChamadoException):
    def __init__(self, notificacao_id: str):
        self.notificacao_id = notificacao_id
        super().__init__(f"Notificação {notificacao_id} não encontrada")


class ConfiguracaoDuplicadaError(ChamadoException):
    """Erro quando tenta criar item de configuração duplicado"""
    def __init__(self, nome: str):
        self.nome = nome
        super().__init__(f"Já existe item cadastrado com o nome '{nome}'")


class ConfiguracaoNaoEncontradaError(ChamadoException):
    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item de configuração {item_id} não encontrado")


class ScriptNaoEncontradoError(ChamadoException):
    def __init__(self, script_id: str):
        self.script_id = script_id
        super().__init__(f"Script {script_id} não encontrado")


class LinkUtilNaoEncontradoError(ChamadoException):
    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__(f"Link útil {link_id} não encontrado")
