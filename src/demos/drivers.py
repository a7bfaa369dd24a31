"""
Drivers — демонстрационные прогоны формул

Каждый driver принимает сценарий и возвращает список строк для печати.
Drivers не печатают и не перехватывают ValidationError: ошибки
пробрасываются вызывающему (CLI).
"""

from typing import Callable, Optional

from src.core.math import descriptive, probability_axioms, set_operations
from src.core.math.combinatorics import combinations, factorial, permutations
from src.demos.scenarios import (
    AxiomsScenario,
    BinomialScenario,
    ChebyshevScenario,
    CombinatoricsScenario,
    GeometricScenario,
    HypergeometricScenario,
    JointTableScenario,
    NegativeBinomialScenario,
    PoissonScenario,
    SampleScenario,
    SetScenario,
    UniformScenario,
)
from src.demos.tables import (
    DEFAULT_FORMAT,
    TableFormat,
    format_sequence,
    grid_rows,
    moment_lines,
    probability_header,
    probability_rows,
)
from src.distributions import (
    binomial,
    chebyshev,
    geometric,
    hypergeometric,
    multivariate,
    negative_binomial,
    poisson,
    uniform,
)


# =============================================================================
# КОМБИНАТОРИКА
# =============================================================================


def combinatorics_demo(
    scenario: Optional[CombinatoricsScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or CombinatoricsScenario()
    return [
        f"{s.n}! = {factorial(s.n)}",
        f"C({s.n}, {s.r}) = {combinations(s.n, s.r)}",
        f"P({s.n}, {s.r}) = {permutations(s.n, s.r)}",
    ]


# =============================================================================
# ДИСКРЕТНЫЕ РАСПРЕДЕЛЕНИЯ
# =============================================================================


def binomial_demo(
    scenario: Optional[BinomialScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or BinomialScenario()
    lines = [f"n = {s.n}", f"p = {s.p}", "", probability_header(fmt)]
    lines += probability_rows(
        range(0, s.n + 1),
        lambda y: binomial.exactly(s.n, y, s.p),
        lambda y: binomial.at_least(s.n, y, s.p),
        lambda y: binomial.at_most(s.n, y, s.p),
        fmt,
    )
    lines.append("")
    lines += moment_lines(binomial.expected_value(s.n, s.p), binomial.variance(s.n, s.p))
    lines.append(f"E(Y) from pmf = {binomial.expected_value_from_pmf(s.n, s.p)}")
    lines.append(f"V(Y) from pmf = {binomial.variance_from_pmf(s.n, s.p)}")
    return lines


def geometric_demo(
    scenario: Optional[GeometricScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or GeometricScenario()
    lines = [f"p = {s.p}", "", probability_header(fmt)]
    lines += probability_rows(
        range(1, s.max_y + 1),
        lambda y: geometric.exactly(y, s.p),
        lambda y: geometric.at_least(y, s.p),
        lambda y: geometric.at_most(y, s.p),
        fmt,
    )
    lines.append("")
    lines += moment_lines(geometric.expected_value(s.p), geometric.variance(s.p))
    return lines


def hypergeometric_demo(
    scenario: Optional[HypergeometricScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or HypergeometricScenario()
    lines = [f"N = {s.big_n}", f"r = {s.r}", f"n = {s.n}", "", probability_header(fmt)]
    lines += probability_rows(
        range(0, min(s.n, s.r) + 1),
        lambda y: hypergeometric.exactly(s.big_n, s.n, s.r, y),
        lambda y: hypergeometric.at_least(s.big_n, s.n, s.r, y),
        lambda y: hypergeometric.at_most(s.big_n, s.n, s.r, y),
        fmt,
    )
    lines.append("")
    lines += moment_lines(
        hypergeometric.expected_value(s.big_n, s.n, s.r),
        hypergeometric.variance(s.big_n, s.n, s.r),
    )
    return lines


def negative_binomial_demo(
    scenario: Optional[NegativeBinomialScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or NegativeBinomialScenario()
    lines = [f"r = {s.r}", f"p = {s.p}", "", probability_header(fmt)]
    lines += probability_rows(
        range(s.r, s.max_y + 1),
        lambda y: negative_binomial.exactly(y, s.r, s.p),
        lambda y: negative_binomial.at_least(y, s.r, s.p),
        lambda y: negative_binomial.at_most(y, s.r, s.p),
        fmt,
    )
    lines.append("")
    lines += moment_lines(
        negative_binomial.expected_value(s.r, s.p),
        negative_binomial.variance(s.r, s.p),
    )
    return lines


def _poisson_table(rate: float, max_y: int, fmt: TableFormat) -> list[str]:
    lines = [f"λ = {rate}", "", probability_header(fmt)]
    lines += probability_rows(
        range(0, max_y + 1),
        lambda y: poisson.exactly(rate, y),
        lambda y: poisson.at_least(rate, y),
        lambda y: poisson.at_most(rate, y),
        fmt,
    )
    lines.append("")
    lines += moment_lines(poisson.expected_value(rate), poisson.variance(rate))
    return lines


def poisson_demo(
    scenario: Optional[PoissonScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or PoissonScenario()
    return _poisson_table(s.rate, s.max_y, fmt)


def chebyshev_demo(
    scenario: Optional[ChebyshevScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or ChebyshevScenario()
    lines = _poisson_table(s.rate, s.max_y, fmt)
    lines += [
        "",
        f"σ = {s.std_dev}",
        f"maxDev = {s.max_dev}",
        "",
        f"Within range:  ≥{fmt.value(chebyshev.within_range(s.std_dev, s.max_dev)).rstrip()}",
        f"Outside range: ≤{fmt.value(chebyshev.outside_range(s.std_dev, s.max_dev)).rstrip()}",
    ]
    return lines


# =============================================================================
# НЕПРЕРЫВНЫЕ И ДВУМЕРНЫЕ
# =============================================================================


def uniform_demo(
    scenario: Optional[UniformScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or UniformScenario()
    return [
        f"a = {s.a}",
        f"b = {s.b}",
        f"c = {s.c}",
        f"d = {s.d}",
        "",
        f"P(c≤y≤d) = {uniform.between(s.a, s.b, s.c, s.d)}",
        f"P(c≤y) = {uniform.at_least(s.a, s.b, s.c)}",
        f"P(y≤d) = {uniform.at_most(s.a, s.b, s.d)}",
        f"E(Y) = {uniform.expected_value(s.a, s.b)}",
        f"V(Y) = {uniform.variance(s.a, s.b)}",
    ]


def joint_table_demo(
    scenario: Optional[JointTableScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or JointTableScenario()
    rows = len(s.table)
    columns = len(s.table[0])
    lines = grid_rows(
        "p(y1,y2) =",
        rows,
        columns,
        lambda i, j: multivariate.joint_probability(s.table, i, j),
        fmt,
    )
    lines.append("")
    lines += grid_rows(
        "F(y1,y2) =",
        rows,
        columns,
        lambda i, j: multivariate.joint_distribution(s.table, i, j),
        fmt,
    )
    return lines


# =============================================================================
# ОПИСАТЕЛЬНЫЕ СТАТИСТИКИ, МНОЖЕСТВА, АКСИОМЫ
# =============================================================================


def descriptive_demo(
    scenario: Optional[SampleScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or SampleScenario()
    values = list(s.values)
    extended = values + [s.extra_value]
    return [
        f"testNumbers = {format_sequence(values)}",
        f"Average of testNumbers: {descriptive.mean(values)}",
        f"Median of testNumbers: {descriptive.median(values)}",
        f"Mode of testNumbers: {descriptive.mode(values)}",
        f"Variance of testNumbers: {descriptive.variance(values)}",
        f"Standard deviation of testNumbers: {descriptive.standard_deviation(values)}",
        "",
        f"testNumbers = {format_sequence(extended)}",
        f"Median of testNumbers: {descriptive.median(extended)}",
    ]


def sets_demo(
    scenario: Optional[SetScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or SetScenario()
    named = {"planets": s.planets, "elements": s.elements, "cats": s.cats}
    pairs = [("planets", "elements"), ("planets", "cats"), ("elements", "cats")]

    lines = [f"{name} = {format_sequence(values)}" for name, values in named.items()]
    lines.append("")
    for a, b in pairs:
        lines.append(f"{a} ∪ {b} = {format_sequence(set_operations.union(named[a], named[b]))}")
    lines.append("")
    for a, b in pairs:
        lines.append(
            f"{a} ∩ {b} = {format_sequence(set_operations.intersection(named[a], named[b]))}"
        )
    lines.append("")
    lines.append(
        "elements \\ metals (complement of metals) = "
        f"{format_sequence(set_operations.complement(s.elements, s.metals))}"
    )
    return lines


def axioms_demo(
    scenario: Optional[AxiomsScenario] = None,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    s = scenario or AxiomsScenario()
    p_intersection = probability_axioms.dependent_intersection(s.p_a, s.p_b_given_a)
    p_union = probability_axioms.union(s.p_a, s.p_b, p_intersection)
    p_exclusive = probability_axioms.exclusive_union(s.p_a, s.p_b, p_intersection)
    p_independent = probability_axioms.independent_intersection(s.p_a, s.p_b)
    independent_by_intersection = probability_axioms.are_independent_from_intersection(
        s.p_a, s.p_b, p_intersection
    )
    independent_by_union = probability_axioms.are_independent_from_union(s.p_a, s.p_b, p_union)
    p_c_given_d = probability_axioms.conditional_probability(s.p_c_intersect_d, s.p_d)
    posteriors = probability_axioms.bayesian_probabilities(s.p_conditionals, s.p_partition)

    lines = [
        f"P(A) = {s.p_a}",
        f"P(B) = {s.p_b}",
        f"P(B|A) = {s.p_b_given_a}",
        f"P(A∩B) = {p_intersection} (based on P(B|A))",
        f"P(A∩B) = {p_independent} (assuming A and B are independent)",
        f"P(A∪B) = {p_union}",
        f"P(AΔB) = {p_exclusive}",
        f"A and B are independent? {independent_by_intersection} (based on intersection)",
        f"A and B are independent? {independent_by_union} (based on union)",
        "",
        f"P(C∩D) = {s.p_c_intersect_d}",
        f"P(D) = {s.p_d}",
        f"P(C|D) = {p_c_given_d}",
        "",
    ]
    lines += [f"P(F{i}) = {p:.{fmt.precision}f}" for i, p in enumerate(s.p_partition, start=1)]
    lines += [
        f"P(E|F{i}) = {p:.{fmt.precision}f}" for i, p in enumerate(s.p_conditionals, start=1)
    ]
    lines += [f"P(F{i}|E) = {p:.{fmt.precision}f}" for i, p in enumerate(posteriors, start=1)]
    return lines


# =============================================================================
# РЕЕСТР
# =============================================================================

# Имя демо → (driver, класс сценария); порядок определяет порядок `all`
DEMOS: dict[str, tuple[Callable[..., list[str]], type]] = {
    "combinatorics": (combinatorics_demo, CombinatoricsScenario),
    "binomial": (binomial_demo, BinomialScenario),
    "geometric": (geometric_demo, GeometricScenario),
    "hypergeometric": (hypergeometric_demo, HypergeometricScenario),
    "negative-binomial": (negative_binomial_demo, NegativeBinomialScenario),
    "poisson": (poisson_demo, PoissonScenario),
    "uniform": (uniform_demo, UniformScenario),
    "joint-table": (joint_table_demo, JointTableScenario),
    "chebyshev": (chebyshev_demo, ChebyshevScenario),
    "descriptive": (descriptive_demo, SampleScenario),
    "sets": (sets_demo, SetScenario),
    "axioms": (axioms_demo, AxiomsScenario),
}
