"""
Scenarios — параметры демонстрационных сценариев

Immutable Pydantic модели. Значения по умолчанию воспроизводят классические
учебные примеры; Field constraints отсекают структурно невозможные параметры
(например, отрицательное количество испытаний) ещё при создании сценария.
Доменные соотношения между полями (y <= n, r <= N, ...) проверяют сами формулы.
"""

import math

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ДИСКРЕТНЫЕ РАСПРЕДЕЛЕНИЯ
# =============================================================================


class BinomialScenario(BaseModel):
    """Биномиальное распределение: таблица для y = 0..n."""

    n: int = Field(4, ge=0, description="Количество испытаний")
    p: float = Field(1.0 / 3, ge=0.0, le=1.0, description="Вероятность успеха")

    model_config = {"frozen": True, "extra": "forbid"}


class GeometricScenario(BaseModel):
    """Геометрическое распределение: таблица для y = 1..max_y."""

    p: float = Field(0.3, gt=0.0, le=1.0, description="Вероятность успеха")
    max_y: int = Field(10, ge=1, description="Последний номер испытания в таблице")

    model_config = {"frozen": True, "extra": "forbid"}


class HypergeometricScenario(BaseModel):
    """Гипергеометрическое распределение: таблица для y = 0..n."""

    big_n: int = Field(10, ge=2, description="Размер множества N")
    r: int = Field(5, ge=0, description="Количество помеченных объектов")
    n: int = Field(3, ge=0, description="Количество извлекаемых объектов")

    model_config = {"frozen": True, "extra": "forbid"}


class NegativeBinomialScenario(BaseModel):
    """Отрицательное биномиальное распределение: таблица для y = r..max_y."""

    r: int = Field(3, ge=1, description="Требуемое количество успехов")
    p: float = Field(0.1, gt=0.0, le=1.0, description="Вероятность успеха")
    max_y: int = Field(50, ge=1, description="Последний номер испытания в таблице")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_table_bounds(self) -> "NegativeBinomialScenario":
        if self.max_y < self.r:
            raise ValueError(f"max_y must be >= r, got max_y={self.max_y}, r={self.r}")
        return self


class PoissonScenario(BaseModel):
    """Распределение Пуассона: таблица для y = 0..max_y."""

    rate: float = Field(2.0, ge=0.0, description="Интенсивность λ")
    max_y: int = Field(10, ge=0, description="Последнее количество событий в таблице")

    model_config = {"frozen": True, "extra": "forbid"}


class ChebyshevScenario(BaseModel):
    """
    Неравенство Чебышёва на фоне распределения Пуассона.

    σ = std_dev_mult * sqrt(λ), maxDev = max_dev_mult * σ.
    """

    rate: float = Field(10.0, gt=0.0, description="Интенсивность λ")
    max_y: int = Field(20, ge=0, description="Последнее количество событий в таблице")
    std_dev_mult: float = Field(3.0, gt=0.0, description="Множитель для sqrt(λ)")
    max_dev_mult: float = Field(2.0, gt=0.0, description="Отклонение в единицах σ")

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.rate) * self.std_dev_mult

    @property
    def max_dev(self) -> float:
        return self.max_dev_mult * self.std_dev


# =============================================================================
# НЕПРЕРЫВНЫЕ И ДВУМЕРНЫЕ
# =============================================================================


class UniformScenario(BaseModel):
    """Равномерное распределение на [a, b] и запрос [c, d]."""

    a: float = Field(20.0, description="Нижняя граница распределения")
    b: float = Field(25.0, description="Верхняя граница распределения")
    c: float = Field(22.0, description="Нижняя граница диапазона")
    d: float = Field(24.0, description="Верхняя граница диапазона")

    model_config = {"frozen": True, "extra": "forbid"}


class JointTableScenario(BaseModel):
    """Таблица совместного распределения p(y1, y2)."""

    table: tuple[tuple[float, ...], ...] = Field(
        (
            (1.0 / 9, 2.0 / 9, 1.0 / 9),
            (2.0 / 9, 2.0 / 9, 0.0),
            (1.0 / 9, 0.0, 0.0),
        ),
        min_length=1,
        description="Строки — y1, столбцы — y2",
    )

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# ОПИСАТЕЛЬНЫЕ СТАТИСТИКИ, МНОЖЕСТВА, АКСИОМЫ
# =============================================================================


class SampleScenario(BaseModel):
    """Выборка для описательных статистик и значение для проверки чётной медианы."""

    values: tuple[float, ...] = Field(
        (2.0, 4.0, 4.0, 1.0, 3.0), min_length=2, description="Выборка"
    )
    extra_value: float = Field(6.0, description="Добавляется для медианы чётной выборки")

    model_config = {"frozen": True, "extra": "forbid"}


class SetScenario(BaseModel):
    """Именованные множества для демонстрации ∪, ∩ и дополнения."""

    planets: tuple[str, ...] = ("Mercury", "Venus", "Earth")
    elements: tuple[str, ...] = ("Mercury", "Carbon", "Tungsten")
    metals: tuple[str, ...] = ("Mercury", "Tungsten")
    cats: tuple[str, ...] = ("Carbon", "Tungsten", "Bootsy")

    model_config = {"frozen": True, "extra": "forbid"}


class AxiomsScenario(BaseModel):
    """Вероятности событий для правил сложения, умножения и формулы Байеса."""

    p_a: float = Field(0.1, ge=0.0, le=1.0, description="P(A)")
    p_b: float = Field(0.5, ge=0.0, le=1.0, description="P(B)")
    p_b_given_a: float = Field(0.5, ge=0.0, le=1.0, description="P(B|A)")
    p_c_intersect_d: float = Field(0.05, ge=0.0, le=1.0, description="P(C∩D)")
    p_d: float = Field(0.1, ge=0.0, le=1.0, description="P(D)")
    p_conditionals: tuple[float, ...] = Field(
        (0.5, 0.25, 0.25), min_length=1, description="P(E|F1), ..., P(E|Fk)"
    )
    p_partition: tuple[float, ...] = Field(
        (0.2, 0.4, 0.4), min_length=1, description="P(F1), ..., P(Fk)"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class CombinatoricsScenario(BaseModel):
    """Факториал, сочетания и размещения."""

    n: int = Field(20, ge=0, description="Количество объектов")
    r: int = Field(10, ge=0, description="Количество выбираемых объектов")

    model_config = {"frozen": True, "extra": "forbid"}
