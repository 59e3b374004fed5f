"""8-bit linear feedback shift register used for apple placement."""

from __future__ import annotations

# Bits XORed into bit 0 on every shift (x^8 + x^4 + x^3 + x^2 + 1).
TAPS = (7, 5, 4, 3)
WIDTH_MASK = 0xFF


def next_value(value: int) -> int:
    """Return the register value one shift after *value*."""
    feedback = 0
    for bit in TAPS:
        feedback ^= (value >> bit) & 1
    return ((value << 1) | feedback) & WIDTH_MASK


class Lfsr:
    """Maximal-length 8-bit LFSR.

    A non-zero seed cycles through all 255 non-zero states and can never
    reach the all-zero lock-up state.
    """

    def __init__(self, seed: int = 0xA5) -> None:
        if not 0 < seed <= WIDTH_MASK:
            raise ValueError("LFSR seed must be a non-zero 8-bit value.")
        self.seed = seed
        self.value = seed

    def reset(self) -> None:
        self.value = self.seed

    def advance(self) -> int:
        """Shift once and return the new value."""
        self.value = next_value(self.value)
        return self.value
