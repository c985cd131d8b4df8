"""
Customer API - ponto de entrada
===============================
Executa o servidor uvicorn com as configurações do ambiente.
"""

import logging
import sys

import uvicorn

from src.core.config import config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def main():
    """Função principal para executar o servidor"""

    uvicorn_config = {
        "app": "src.main:app",
        "host": config.HOST,
        "port": config.PORT,
        "reload": config.DEBUG,
        "log_level": config.LOG_LEVEL.lower(),
        "access_log": config.DEBUG,
    }

    logger.info(f"🌐 Servidor iniciando em http://{config.HOST}:{config.PORT}")
    uvicorn.run(**uvicorn_config)


if __name__ == "__main__":
    main()
