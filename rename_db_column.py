#!/usr/bin/env python
"""
Скрипт для переименования столбца в базе данных.
Отправляет запрос rename_column на admin API запущенного сервера.
"""

import sys
import os

# Добавляем путь к проекту в PYTHONPATH
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from admin_actions.rename_column import main

if __name__ == "__main__":
    main()
