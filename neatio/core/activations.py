"""Node activation types and the name registry used by genome encoders."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from neatio.utils.validation import UnsupportedActivationError


class NodeActivationType(IntEnum):
    SIGMOID_PLAIN = 1
    SIGMOID_REDUCED = 2
    SIGMOID_BIPOLAR = 3
    SIGMOID_STEEPENED = 4
    SIGMOID_APPROXIMATION = 5
    SIGMOID_STEEPENED_APPROXIMATION = 6
    SIGMOID_INVERSE_ABSOLUTE = 7
    SIGMOID_LEFT_SHIFTED = 8
    SIGMOID_LEFT_SHIFTED_STEEPENED = 9
    SIGMOID_RIGHT_SHIFTED_STEEPENED = 10
    TANH = 11
    GAUSSIAN_BIPOLAR = 12
    LINEAR = 13
    LINEAR_ABS = 14
    LINEAR_CLIPPED = 15
    NULL = 16
    SIGN = 17
    SINE = 18
    STEP = 19
    # module (multi-input) activations
    MULTIPLY_MODULE = 20
    MAX_MODULE = 21
    MIN_MODULE = 22


_STANDARD_NAMES: dict[int, str] = {
    NodeActivationType.SIGMOID_PLAIN: "SigmoidPlainActivation",
    NodeActivationType.SIGMOID_REDUCED: "SigmoidReducedActivation",
    NodeActivationType.SIGMOID_BIPOLAR: "SigmoidBipolarActivation",
    NodeActivationType.SIGMOID_STEEPENED: "SigmoidSteepenedActivation",
    NodeActivationType.SIGMOID_APPROXIMATION: "SigmoidApproximationActivation",
    NodeActivationType.SIGMOID_STEEPENED_APPROXIMATION: "SigmoidSteepenedApproximationActivation",
    NodeActivationType.SIGMOID_INVERSE_ABSOLUTE: "SigmoidInverseAbsoluteActivation",
    NodeActivationType.SIGMOID_LEFT_SHIFTED: "SigmoidLeftShiftedActivation",
    NodeActivationType.SIGMOID_LEFT_SHIFTED_STEEPENED: "SigmoidLeftShiftedSteepenedActivation",
    NodeActivationType.SIGMOID_RIGHT_SHIFTED_STEEPENED: "SigmoidRightShiftedSteepenedActivation",
    NodeActivationType.TANH: "TanhActivation",
    NodeActivationType.GAUSSIAN_BIPOLAR: "GaussianBipolarActivation",
    NodeActivationType.LINEAR: "LinearActivation",
    NodeActivationType.LINEAR_ABS: "LinearAbsActivation",
    NodeActivationType.LINEAR_CLIPPED: "LinearClippedActivation",
    NodeActivationType.NULL: "NullActivation",
    NodeActivationType.SIGN: "SignActivation",
    NodeActivationType.SINE: "SineActivation",
    NodeActivationType.STEP: "StepActivation",
    NodeActivationType.MULTIPLY_MODULE: "MultiplyModuleActivation",
    NodeActivationType.MAX_MODULE: "MaxModuleActivation",
    NodeActivationType.MIN_MODULE: "MinModuleActivation",
}


class ActivationResolver(Protocol):
    def activation_name_from_type(self, activation_type: int) -> str: ...


class ActivationRegistry:
    """Bidirectional activation type <-> canonical name table."""

    def __init__(self, names: dict[int, str] | None = None) -> None:
        self._by_type: dict[int, str] = {}
        self._by_name: dict[str, int] = {}
        for activation_type, name in (names or {}).items():
            self.register(activation_type, name)

    def register(self, activation_type: int, name: str) -> None:
        key = int(activation_type)
        previous = self._by_type.get(key)
        if previous is not None:
            del self._by_name[previous]
        self._by_type[key] = name
        self._by_name[name] = key

    def activation_name_from_type(self, activation_type: int) -> str:
        try:
            return self._by_type[int(activation_type)]
        except (KeyError, TypeError, ValueError) as exc:
            raise UnsupportedActivationError(activation_type) from exc

    def activation_type_from_name(self, name: str) -> int:
        try:
            return self._by_name[name]
        except KeyError as exc:
            raise UnsupportedActivationError(name) from exc

    def __contains__(self, activation_type: object) -> bool:
        return activation_type in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


NODE_ACTIVATORS = ActivationRegistry(_STANDARD_NAMES)


__all__ = [
    "NodeActivationType",
    "ActivationResolver",
    "ActivationRegistry",
    "NODE_ACTIVATORS",
]
