"""Systematic Reed-Solomon encoder over GF(2**6)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

_MM = 6
_NN = (1 << _MM) - 1
_MAX_PARITY = 22
# Coefficients of the primitive polynomial 1 + x + x**6.
_PRIMITIVE_POLY = (1, 1, 0, 0, 0, 0, 1)


def _build_tables() -> tuple[tuple[int, ...], tuple[Optional[int], ...]]:
    exp = [0] * (_NN + 1)
    log: list[Optional[int]] = [0] * (_NN + 1)
    mask = 1
    for i, coefficient in enumerate(_PRIMITIVE_POLY[:_MM]):
        exp[i] = mask
        log[mask] = i
        if coefficient:
            exp[_MM] ^= mask
        mask <<= 1
    log[exp[_MM]] = _MM
    mask >>= 1
    for i in range(_MM + 1, _NN):
        previous = exp[i - 1]
        if previous >= mask:
            exp[i] = exp[_MM] ^ ((previous ^ mask) << 1)
        else:
            exp[i] = previous << 1
        log[exp[i]] = i
    log[0] = None
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def _check_tt(tt: int) -> None:
    if not 1 <= tt <= _MAX_PARITY // 2:
        raise ValueError(f"error-correcting capability must be 1..{_MAX_PARITY // 2}, got {tt}")


def generator_polynomial(tt: int) -> list[int]:
    """Return the product of (X + alpha**i) for i = 1..2*tt, lowest degree first."""
    _check_tt(tt)
    gg = [2, 1] + [0] * (2 * tt - 1)
    for i in range(2, 2 * tt + 1):
        gg[i] = 1
        for j in range(i - 1, 0, -1):
            if gg[j]:
                gg[j] = gg[j - 1] ^ _EXP[(_LOG[gg[j]] + i) % _NN]
            else:
                gg[j] = gg[j - 1]
        gg[0] = _EXP[(_LOG[gg[0]] + i) % _NN]
    return gg


class ReedSolomonEncoder:
    """Produces 2*tt parity symbols for a sequence of 6-bit data symbols."""

    def __init__(self, tt: int) -> None:
        _check_tt(tt)
        self.tt = tt
        self._generator_log = [_LOG[c] for c in generator_polynomial(tt)]

    def encode(self, data: Iterable[int]) -> list[int]:
        """Return the parity symbols, highest degree first."""
        parity_len = 2 * self.tt
        register = [0] * parity_len
        for symbol in data:
            if not 0 <= symbol <= _NN:
                raise ValueError(f"symbol {symbol} is outside 0..{_NN}")
            feedback = _LOG[symbol ^ register[-1]]
            shifted = [0] + register[:-1]
            if feedback is None:
                register = shifted
            else:
                register = [
                    s ^ _EXP[(g + feedback) % _NN] if g is not None else s
                    for s, g in zip(shifted, self._generator_log)
                ]
        return register[::-1]