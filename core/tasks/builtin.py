# Path: core/tasks/builtin.py
# Purpose: Register the built-in behavior-tree tasks shipped with the runtime.
# Layer: core/tasks.
# Details: Provides the default category -> class name table and the startup registration helper.

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol, Tuple


class SupportsRegister(Protocol):
    def register(self, class_name: str, category: str) -> None:
        ...


BUILTIN_TASKS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Composites": (
        "BTSequence",
        "BTSelector",
        "BTParallel",
        "BTDynamicSequence",
        "BTDynamicSelector",
        "BTRandomSequence",
        "BTRandomSelector",
        "BTProbabilitySelector",
    ),
    "Decorators": (
        "BTAlwaysFail",
        "BTAlwaysSucceed",
        "BTCooldown",
        "BTDelay",
        "BTForEach",
        "BTInvert",
        "BTNewScope",
        "BTProbability",
        "BTRepeat",
        "BTRepeatUntilFailure",
        "BTRepeatUntilSuccess",
        "BTRunLimit",
        "BTSubtree",
        "BTTimeLimit",
    ),
    "Actions": (
        "BTAwaitAnimation",
        "BTCallMethod",
        "BTEvaluateExpression",
        "BTPauseAnimation",
        "BTPlayAnimation",
        "BTRandomWait",
        "BTSetAgentProperty",
        "BTStopAnimation",
        "BTWait",
        "BTWaitTicks",
    ),
    "Conditions": ("BTCheckAgentProperty",),
    "Blackboard": ("BTCheckTrigger", "BTCheckVar", "BTSetVar"),
    "Utility": ("BTComment", "BTConsolePrint", "BTFail"),
})


def register_builtin_tasks(task_db: SupportsRegister, tasks: Mapping[str, Tuple[str, ...]] = BUILTIN_TASKS) -> int:
    """Register every built-in task in table order and return how many were added."""

    count = 0
    for category, class_names in tasks.items():
        for class_name in class_names:
            task_db.register(class_name, category)
            count += 1
    return count
