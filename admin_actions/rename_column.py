import logging
import sys
from typing import Optional

from admin_actions.config import settings
from admin_actions.services.admin_api_service import AdminAPIService, admin_api_service

logger = logging.getLogger(__name__)

def rename_column(service: Optional[AdminAPIService] = None) -> Optional[str]:
    """Просит запущенный сервер переименовать столбец в базе данных"""
    service = service or admin_api_service

    try:
        print("🔄 Renaming database column...")
        result = service.run_database_action(settings.RENAME_COLUMN_ACTION)
        print("✅ Column rename result:", result)
        return result
    except Exception as e:
        logger.error(f"❌ Ошибка при запросе к {service.database_action_url}: {e!r}")
        print("❌ Error renaming column:", str(e) or type(e).__name__)
        return None

def main():
    # Логи в stderr, в stdout только сообщения для оператора
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    rename_column()

if __name__ == "__main__":
    main()
