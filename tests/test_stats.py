from wedding_planner.modules.gift_registry.service import compute_gift_registry_stats
from wedding_planner.modules.tasks.service import compute_task_stats


def test_task_stats():
    stats = compute_task_stats([{"completed": True}, {"completed": False}, {"completed": True}])

    assert stats.total == 3
    assert stats.completed == 2
    assert stats.pending == 1
    assert stats.completionRate == 67


def test_task_stats_without_tasks():
    stats = compute_task_stats([])

    assert stats.total == 0
    assert stats.completionRate == 0


def test_gift_registry_stats():
    stats = compute_gift_registry_stats([
        {"price": 50, "quantity": 2, "purchased": 1},
        {"price": 100, "quantity": 1, "purchased": 0},
    ])

    assert stats.totalItems == 2
    assert stats.totalValue == 200
    assert stats.purchasedValue == 50
    assert stats.remainingValue == 150
    assert stats.totalQuantity == 3
    assert stats.purchasedQuantity == 1
    assert stats.remainingQuantity == 2
    assert stats.completionRate == 25


def test_gift_registry_stats_allow_over_purchase():
    stats = compute_gift_registry_stats([{"price": 10, "quantity": 1, "purchased": 2}])

    assert stats.remainingQuantity == -1
    assert stats.completionRate == 200
