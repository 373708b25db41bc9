import logging

class Settings:
    # Admin API сервера (локальный), окружение не читаем
    ADMIN_API_BASE_URL = "http://localhost:5000"
    DATABASE_ACTION_PATH = "/api/admin/database-action"

    # Единственное действие, которое отправляет скрипт
    RENAME_COLUMN_ACTION = "rename_column"

    LOG_LEVEL = logging.INFO

settings = Settings()
