import pytest

from knapsack_lab import service
from knapsack_lab.models import Item, Knapsack, SolverError


def _check_all(knapsack, expected):
    for solver in service.get_all_algorithms():
        assert solver.solve(knapsack) == expected, solver.name


def test_knapsack_all():
    knapsack = Knapsack(10, [Item(5, 10), Item(3, 7), Item(2, 5)])
    _check_all(knapsack, 22)


def test_knapsack_one_odd():
    knapsack = Knapsack(10, [Item(5, 10), Item(3, 7), Item(3, 5)])
    _check_all(knapsack, 17)


def test_knapsack_elements_too_big():
    knapsack = Knapsack(10, [Item(15, 10), Item(33, 7), Item(3666, 5)])
    _check_all(knapsack, 0)


def test_knapsack_empty():
    _check_all(Knapsack(10, []), 0)


def test_knapsack_algo_based_on_value():
    knapsack = Knapsack(
        10, [Item(1, 2), Item(5, 15), Item(2, 4), Item(5, 15), Item(3, 8)]
    )
    _check_all(knapsack, 30)


def test_algorithm_names_in_order():
    assert service.get_algorithms_names() == [
        "Recursion",
        "Bit mask",
        "Dynamic",
        "Lazy Dynamic",
        "Greedy",
    ]


def test_get_algorithms_by_names_keeps_standard_order():
    solvers = service.get_algorithms_by_names(["Greedy", "Dynamic"])
    assert [s.name for s in solvers] == ["Dynamic", "Greedy"]


def test_get_algorithms_by_names_ignores_unknown():
    assert service.get_algorithms_by_names(["Nope"]) == []


def test_solve_by_name():
    knapsack = Knapsack(10, [Item(5, 10), Item(3, 7), Item(2, 5)])
    assert service.solve("Dynamic", knapsack) == 22


def test_solve_unknown_name():
    with pytest.raises(SolverError, match="Can't find algorithm name"):
        service.solve("Unknown", Knapsack(10, []))


def test_solve_propagates_solver_error():
    knapsack = Knapsack(2**64 - 1, [Item(1, 1)])
    with pytest.raises(SolverError, match="Capacity too large to process"):
        service.solve("Dynamic", knapsack)