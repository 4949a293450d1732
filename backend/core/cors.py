"""CORS da aplicação com rotas públicas fora da lista de origens"""
from typing import Iterable

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class CORSComRotasPublicas(CORSMiddleware):
    """
    CORSMiddleware restrito às origens do frontend.

    Caminhos em `rotas_publicas` passam direto para a aplicação: a própria rota
    responde o preflight e envia os cabeçalhos CORS (qualquer origem).
    """

    def __init__(self, app: ASGIApp, rotas_publicas: Iterable[str] = (), **kwargs) -> None:
        super().__init__(app, **kwargs)
        self.rotas_publicas = {rota.rstrip("/") for rota in rotas_publicas}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") in self.rotas_publicas:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
