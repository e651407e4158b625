from __future__ import annotations

from prometheus_client import Counter, Gauge

DISH_OPERATIONS_TOTAL = Counter(
    "foodstory_dish_operations_total",
    "Total number of dish mutations by operation and category.",
    ["operation", "category"],
)

SIDE_OPERATIONS_TOTAL = Counter(
    "foodstory_side_operations_total",
    "Total number of side mutations by operation.",
    ["operation"],
)

MENU_OPERATIONS_TOTAL = Counter(
    "foodstory_menu_operations_total",
    "Total number of whole-menu operations (replace, rotate, clear).",
    ["operation"],
)

STORE_DEGRADED_TOTAL = Counter(
    "foodstory_store_degraded_total",
    "Total number of menu file reads or writes that fell back to memory.",
    ["operation"],
)

MENU_DISHES = Gauge(
    "foodstory_menu_dishes",
    "Number of dishes per category at the last save.",
    ["category"],
)


def record_dish_operation(operation: str, category: str) -> None:
    DISH_OPERATIONS_TOTAL.labels(operation=operation, category=category).inc()


def record_side_operation(operation: str) -> None:
    SIDE_OPERATIONS_TOTAL.labels(operation=operation).inc()


def record_menu_operation(operation: str) -> None:
    MENU_OPERATIONS_TOTAL.labels(operation=operation).inc()


def record_store_degraded(operation: str) -> None:
    STORE_DEGRADED_TOTAL.labels(operation=operation).inc()


def record_menu_size(category: str, size: int) -> None:
    MENU_DISHES.labels(category=category).set(size)
