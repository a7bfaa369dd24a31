"""
Тесты для дискретных распределений

Покрытие:
- Binomial: значения, суммы, моменты (замкнутые и через pmf), большие n
- Geometric: значения, дополнительность, моменты
- Hypergeometric: значения, носитель, моменты, порядок проверок
- Negative binomial: значения, дополнительность, моменты
- Poisson: значения, дополнительность, λ = 0
"""

import math

import pytest

from src.core.math.preconditions import ValidationError
from src.distributions import binomial, geometric, hypergeometric, negative_binomial, poisson


# =============================================================================
# ТЕСТЫ: Binomial
# =============================================================================


class TestBinomial:
    """n = 4, p = 1/3 и граничные случаи"""

    N = 4
    P = 1.0 / 3

    def test_exactly_known_values(self):
        assert binomial.exactly(self.N, 0, self.P) == pytest.approx(16 / 81)
        assert binomial.exactly(self.N, 1, self.P) == pytest.approx(32 / 81)
        assert binomial.exactly(self.N, 2, self.P) == pytest.approx(24 / 81)
        assert binomial.exactly(self.N, 4, self.P) == pytest.approx(1 / 81)

    def test_pmf_sums_to_one(self):
        total = sum(binomial.exactly(self.N, y, self.P) for y in range(self.N + 1))
        assert total == pytest.approx(1.0)

    @pytest.mark.parametrize("y", range(0, 5))
    def test_at_least_and_at_most_complement(self, y):
        """P(Y >= y) + P(Y <= y) - P(Y = y) == 1"""
        at_least = binomial.at_least(self.N, y, self.P)
        at_most = binomial.at_most(self.N, y, self.P)
        exactly = binomial.exactly(self.N, y, self.P)
        assert at_least + at_most - exactly == pytest.approx(1.0)

    def test_tails(self):
        assert binomial.at_least(self.N, 0, self.P) == pytest.approx(1.0)
        assert binomial.at_most(self.N, self.N, self.P) == pytest.approx(1.0)

    def test_moments(self):
        assert binomial.expected_value(self.N, self.P) == pytest.approx(4 / 3)
        assert binomial.variance(self.N, self.P) == pytest.approx(8 / 9)

    @pytest.mark.parametrize("n, p", [(4, 1.0 / 3), (10, 0.5), (25, 0.9), (0, 0.3)])
    def test_moments_from_pmf_match_closed_form(self, n, p):
        assert binomial.expected_value_from_pmf(n, p) == pytest.approx(binomial.expected_value(n, p))
        assert binomial.variance_from_pmf(n, p) == pytest.approx(
            binomial.variance(n, p), abs=1e-9
        )

    def test_degenerate_probabilities(self):
        """p = 0 и p = 1: 0^0 = 1"""
        assert binomial.exactly(5, 0, 0.0) == 1.0
        assert binomial.exactly(5, 5, 1.0) == 1.0
        assert binomial.exactly(5, 3, 0.0) == 0.0

    def test_large_n_does_not_overflow(self):
        """C(2000, 1000) ~ 2e600 вне диапазона float, результат всё равно конечен"""
        result = binomial.exactly(2000, 1000, 0.5)
        assert math.isfinite(result)
        assert result == pytest.approx(1 / math.sqrt(math.pi * 1000), rel=1e-3)

    def test_too_many_successes(self):
        with pytest.raises(ValidationError, match="Cannot have 5 successes in 4 trials"):
            binomial.exactly(4, 5, 0.5)

    def test_negative_trials_checked_first(self):
        with pytest.raises(ValidationError, match="Number of trials cannot be negative"):
            binomial.at_least(-1, 5, 1.5)

    def test_negative_successes(self):
        with pytest.raises(ValidationError, match="Number of successes cannot be negative"):
            binomial.at_most(4, -1, 0.5)

    def test_invalid_probability(self):
        with pytest.raises(ValidationError, match="Invalid probability p = 1.5"):
            binomial.exactly(4, 1, 1.5)

        with pytest.raises(ValidationError, match="Invalid probability"):
            binomial.variance(4, -0.1)


# =============================================================================
# ТЕСТЫ: Geometric
# =============================================================================


class TestGeometric:
    """p = 0.3"""

    P = 0.3

    def test_known_values(self):
        assert geometric.exactly(1, self.P) == pytest.approx(0.3)
        assert geometric.exactly(2, self.P) == pytest.approx(0.21)
        assert geometric.at_least(1, self.P) == pytest.approx(1.0)
        assert geometric.at_least(3, self.P) == pytest.approx(0.49)
        assert geometric.at_most(2, self.P) == pytest.approx(0.51)

    @pytest.mark.parametrize("y", range(1, 11))
    def test_at_most_equals_partial_sum(self, y):
        partial = sum(geometric.exactly(i, self.P) for i in range(1, y + 1))
        assert geometric.at_most(y, self.P) == pytest.approx(partial)

    @pytest.mark.parametrize("y", range(1, 11))
    def test_at_least_complements_at_most(self, y):
        assert geometric.at_least(y + 1, self.P) + geometric.at_most(y, self.P) == pytest.approx(1.0)

    def test_moments(self):
        assert geometric.expected_value(self.P) == pytest.approx(1 / 0.3)
        assert geometric.variance(self.P) == pytest.approx(0.7 / 0.09)

    def test_zero_trial_number(self):
        with pytest.raises(ValidationError, match="Number of trials cannot be zero"):
            geometric.exactly(0, self.P)

    def test_negative_trial_number(self):
        with pytest.raises(ValidationError, match="Number of trials cannot be negative"):
            geometric.at_least(-2, self.P)

    def test_zero_probability_moments(self):
        """p = 0 — допустимая вероятность, но не делитель"""
        with pytest.raises(ValidationError, match="Cannot divide by zero: p = 0"):
            geometric.expected_value(0.0)

        with pytest.raises(ValidationError, match="Cannot divide by zero"):
            geometric.variance(0.0)

    def test_invalid_probability(self):
        with pytest.raises(ValidationError, match="Invalid probability"):
            geometric.at_most(3, 1.2)


# =============================================================================
# ТЕСТЫ: Hypergeometric
# =============================================================================


class TestHypergeometric:
    """N = 10, n = 3, r = 5"""

    BIG_N = 10
    N = 3
    R = 5

    def test_known_values(self):
        assert hypergeometric.exactly(self.BIG_N, self.N, self.R, 0) == pytest.approx(10 / 120)
        assert hypergeometric.exactly(self.BIG_N, self.N, self.R, 1) == pytest.approx(50 / 120)
        assert hypergeometric.exactly(self.BIG_N, self.N, self.R, 2) == pytest.approx(50 / 120)
        assert hypergeometric.exactly(self.BIG_N, self.N, self.R, 3) == pytest.approx(10 / 120)

    def test_tails(self):
        assert hypergeometric.at_least(self.BIG_N, self.N, self.R, 0) == pytest.approx(1.0)
        assert hypergeometric.at_most(self.BIG_N, self.N, self.R, 3) == pytest.approx(1.0)
        assert hypergeometric.at_least(self.BIG_N, self.N, self.R, 2) == pytest.approx(0.5)
        assert hypergeometric.at_most(self.BIG_N, self.N, self.R, 1) == pytest.approx(0.5)

    def test_moments(self):
        assert hypergeometric.expected_value(self.BIG_N, self.N, self.R) == pytest.approx(1.5)
        assert hypergeometric.variance(self.BIG_N, self.N, self.R) == pytest.approx(0.75 * 7 / 9)

    def test_below_support_is_zero(self):
        """N = 10, r = 8, n = 5: минимум 3 помеченных в выборке"""
        assert hypergeometric.exactly(10, 5, 8, 2) == 0.0
        assert hypergeometric.exactly(10, 5, 8, 3) == pytest.approx(56 / 252)
        assert hypergeometric.at_most(10, 5, 8, 2) == 0.0
        assert hypergeometric.at_least(10, 5, 8, 0) == pytest.approx(1.0)

    def test_aces_in_poker_hand(self):
        """Вероятность четырёх тузов в покерной руке"""
        assert hypergeometric.exactly(52, 5, 4, 4) == pytest.approx(48 / 2598960)

    def test_more_marked_drawn_than_drawn(self):
        with pytest.raises(ValidationError, match="Cannot have 4 successes in 3 trials"):
            hypergeometric.exactly(self.BIG_N, self.N, self.R, 4)

    def test_more_marked_drawn_than_marked(self):
        with pytest.raises(ValidationError, match="Cannot have 3 objects in subset of 2 objects"):
            hypergeometric.exactly(10, 5, 2, 3)

    def test_draw_larger_than_population(self):
        with pytest.raises(ValidationError, match="Cannot have 11 objects in subset of 10 objects"):
            hypergeometric.at_most(10, 11, 5, 0)

    def test_marked_larger_than_population(self):
        with pytest.raises(ValidationError, match="Cannot have 12 objects in subset of 10 objects"):
            hypergeometric.expected_value(10, 3, 12)

    def test_negative_items(self):
        with pytest.raises(ValidationError, match="Number of items cannot be negative, got n = -1"):
            hypergeometric.exactly(10, -1, 5, 0)

        with pytest.raises(ValidationError, match="got r = -5"):
            hypergeometric.variance(10, 3, -5)

    def test_variance_zero_denominator(self):
        with pytest.raises(ValidationError, match="Cannot divide by zero: big_n - 1 = 0"):
            hypergeometric.variance(1, 1, 1)

    def test_expected_value_empty_population(self):
        with pytest.raises(ValidationError, match="Cannot divide by zero: big_n = 0"):
            hypergeometric.expected_value(0, 0, 0)


# =============================================================================
# ТЕСТЫ: Negative binomial
# =============================================================================


class TestNegativeBinomial:
    """r = 3, p = 0.1"""

    R = 3
    P = 0.1

    def test_known_values(self):
        assert negative_binomial.exactly(3, self.R, self.P) == pytest.approx(0.001)
        # C(3, 2) * 0.1^3 * 0.9
        assert negative_binomial.exactly(4, self.R, self.P) == pytest.approx(0.0027)

    def test_first_possible_trial(self):
        assert negative_binomial.at_least(self.R, self.R, self.P) == pytest.approx(1.0)
        assert negative_binomial.at_most(self.R, self.R, self.P) == pytest.approx(0.001)

    @pytest.mark.parametrize("y", [3, 5, 10, 30, 50])
    def test_at_least_complements_at_most(self, y):
        total = negative_binomial.at_most(y, self.R, self.P) + negative_binomial.at_least(
            y + 1, self.R, self.P
        )
        assert total == pytest.approx(1.0)

    def test_r_equals_one_matches_geometric(self):
        for y in range(1, 10):
            assert negative_binomial.exactly(y, 1, 0.3) == pytest.approx(geometric.exactly(y, 0.3))

    def test_moments(self):
        assert negative_binomial.expected_value(self.R, self.P) == pytest.approx(30.0)
        assert negative_binomial.variance(self.R, self.P) == pytest.approx(270.0)

    def test_zero_successes(self):
        with pytest.raises(ValidationError, match="Number of successes cannot be zero"):
            negative_binomial.exactly(3, 0, self.P)

        with pytest.raises(ValidationError, match="Number of successes cannot be zero"):
            negative_binomial.expected_value(0, self.P)

    def test_trial_before_rth_success(self):
        with pytest.raises(ValidationError, match="Cannot have 3 successes in 2 trials"):
            negative_binomial.exactly(2, self.R, self.P)

    def test_zero_trials(self):
        with pytest.raises(ValidationError, match="Number of trials cannot be zero"):
            negative_binomial.at_most(0, self.R, self.P)

    def test_zero_probability_moments(self):
        with pytest.raises(ValidationError, match="Cannot divide by zero"):
            negative_binomial.variance(self.R, 0.0)


# =============================================================================
# ТЕСТЫ: Poisson
# =============================================================================


class TestPoisson:
    """λ = 2"""

    RATE = 2.0

    def test_known_values(self):
        assert poisson.exactly(self.RATE, 0) == pytest.approx(math.exp(-2))
        assert poisson.exactly(self.RATE, 1) == pytest.approx(2 * math.exp(-2))
        assert poisson.exactly(self.RATE, 3) == pytest.approx(8 / 6 * math.exp(-2))

    @pytest.mark.parametrize("y", range(1, 11))
    def test_at_least_complements_at_most(self, y):
        assert poisson.at_least(self.RATE, y) + poisson.at_most(self.RATE, y - 1) == pytest.approx(1.0)

    def test_at_least_zero_is_certain(self):
        assert poisson.at_least(self.RATE, 0) == pytest.approx(1.0)

    def test_zero_rate(self):
        """λ = 0: событий нет с вероятностью 1"""
        assert poisson.exactly(0.0, 0) == pytest.approx(1.0)
        assert poisson.exactly(0.0, 3) == 0.0

    def test_large_rate_and_count(self):
        """λ^y и y! далеко за пределами float, член распределения конечен"""
        result = poisson.exactly(1000.0, 1000)
        assert math.isfinite(result)
        assert result == pytest.approx(1 / math.sqrt(2 * math.pi * 1000), rel=1e-3)

    def test_moments(self):
        assert poisson.expected_value(self.RATE) == self.RATE
        assert poisson.variance(self.RATE) == self.RATE

    def test_negative_rate(self):
        with pytest.raises(ValidationError, match="Occurrence rate cannot be negative"):
            poisson.exactly(-1.0, 0)

        with pytest.raises(ValidationError, match="Occurrence rate cannot be negative"):
            poisson.variance(-0.5)

    @pytest.mark.parametrize("rate", [float("inf"), float("nan")])
    def test_non_finite_rate(self, rate):
        with pytest.raises(ValidationError, match="Occurrence rate must be finite"):
            poisson.exactly(rate, 2)

        with pytest.raises(ValidationError, match="Occurrence rate must be finite"):
            poisson.at_least(rate, 2)

    def test_rate_beyond_default_decimal_range(self):
        """rate^y выходит за стандартный Emax Decimal, ответ всё равно float"""
        assert poisson.exactly(1e300, 3400) == 0.0

    def test_negative_count(self):
        with pytest.raises(ValidationError, match="Number of successes cannot be negative"):
            poisson.at_most(self.RATE, -1)
