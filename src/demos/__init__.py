"""
Demos — демонстрационные прогоны формул с печатью таблиц.

- scenarios: параметры сценариев (Pydantic)
- tables: форматирование строк
- drivers: один driver на тему, возвращает строки
- cli: точка входа `stats-demo`
"""

from src.demos.drivers import DEMOS

__all__ = ["DEMOS"]
