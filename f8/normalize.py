from __future__ import annotations

from typing import Tuple

from .format import FORMAT, F8Format


def normalize(exponent: int, significand: int, fmt: F8Format = FORMAT) -> Tuple[int, int]:
	"""Bring a wide (exponent, significand) intermediate back into the field widths.

	An exponent already at the field maximum saturates to the infinity sentinel
	(max exponent, significand 0). Otherwise the significand is halved and the
	exponent stepped down until the significand fits; the dropped bit is truncated.
	A significand that still does not fit once the exponent reaches 0 saturates too.
	"""
	if exponent >= fmt.max_exponent:
		return fmt.max_exponent, 0
	while significand > fmt.max_significand:
		if exponent == 0:
			return fmt.max_exponent, 0
		exponent -= 1
		significand >>= 1
	return exponent, significand
