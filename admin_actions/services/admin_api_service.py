import aiohttp
import asyncio
import logging
from typing import Optional
from admin_actions.config import settings
from admin_actions.schemas import DatabaseActionRequest

logger = logging.getLogger(__name__)

class AdminAPIService:
    """Сервис для обращения к admin API локального сервера"""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.ADMIN_API_BASE_URL).rstrip("/")
        self.database_action_path = settings.DATABASE_ACTION_PATH

        logger.debug(f"🚀 AdminAPIService инициализирован: {self.base_url}")

    @property
    def database_action_url(self) -> str:
        return f"{self.base_url}{self.database_action_path}"

    async def database_action(self, action: str) -> str:
        """
        Отправка действия над базой данных на admin endpoint

        Args:
            action: Название действия (например, rename_column)

        Returns:
            Тело ответа сервера как текст (при любом HTTP статусе)
        """
        payload = DatabaseActionRequest(action=action).model_dump_json()
        headers = {'Content-Type': 'application/json'}

        logger.info(f"🌐 POST {self.database_action_url}: {payload}")

        async with aiohttp.ClientSession() as session:
            async with session.post(self.database_action_url, data=payload, headers=headers,
                                    allow_redirects=False) as response:
                text = await response.text()
                if response.status >= 300:
                    # Как и curl без -f и -L: тело ответа возвращаем, статус только логируем
                    logger.warning(f"⚠️ Admin API ответил статусом {response.status}")
                else:
                    logger.info(f"✅ Admin API ответил статусом {response.status}")
                logger.debug(f"📡 Ответ от admin API: {text}")
                return text

    def run_database_action(self, action: str) -> str:
        """Синхронная обертка над database_action"""
        return asyncio.run(self.database_action(action))

# Создаем глобальный экземпляр сервиса
admin_api_service = AdminAPIService()
