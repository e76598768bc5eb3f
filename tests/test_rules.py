import pytest

from factory_dashboard.schemas.enums import InventoryStatus, LineStatus
from factory_dashboard.services.rules import (
    derive_efficiency,
    derive_inventory_status,
    derive_production_status,
    round_half_up,
)


@pytest.mark.parametrize("min_required", [1, 25, 100, 500.5])
def test_empty_stock_is_critical(min_required):
    assert derive_inventory_status(0, min_required) == InventoryStatus.CRITICAL


@pytest.mark.parametrize("stock,min_required", [(100, 100), (101, 100), (1250, 500), (0, 0), (5, 0)])
def test_stock_at_or_above_minimum_is_adequate(stock, min_required):
    assert derive_inventory_status(stock, min_required) == InventoryStatus.ADEQUATE


def test_exactly_half_of_minimum_is_low_stock_not_critical():
    assert derive_inventory_status(50, 100) == InventoryStatus.LOW_STOCK


def test_just_below_half_of_minimum_is_critical():
    assert derive_inventory_status(49.99, 100) == InventoryStatus.CRITICAL


def test_fixture_materials_classify_as_expected():
    assert derive_inventory_status(85, 100) == InventoryStatus.LOW_STOCK
    assert derive_inventory_status(120, 500) == InventoryStatus.CRITICAL
    assert derive_inventory_status(42, 25) == InventoryStatus.ADEQUATE


@pytest.mark.parametrize(
    "completed,target,expected",
    [(950, 950, 100), (0, 0, 0), (423, 800, 53), (968, 1200, 81), (1, 8, 13), (5, 0, 0), (1100, 1000, 110)],
)
def test_efficiency(completed, target, expected):
    assert derive_efficiency(completed, target) == expected


def test_efficiency_rounds_half_up():
    # 1/8 = 12.5% and 3/8 = 37.5% both round up
    assert derive_efficiency(1, 8) == 13
    assert derive_efficiency(3, 8) == 38


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(86.5) == 87
    assert round_half_up(67.333) == 67
    assert round_half_up(0) == 0


def test_meeting_target_marks_line_completed():
    assert derive_production_status(950, 950, LineStatus.ACTIVE) == LineStatus.COMPLETED
    assert derive_production_status(1000, 950, "Delayed") == LineStatus.COMPLETED


def test_below_target_keeps_caller_status():
    assert derive_production_status(100, 950, "Delayed") == LineStatus.DELAYED
    assert derive_production_status(0, 1800, LineStatus.MAINTENANCE) == LineStatus.MAINTENANCE


def test_completed_status_is_never_reverted():
    assert derive_production_status(10, 950, LineStatus.COMPLETED) == LineStatus.COMPLETED
