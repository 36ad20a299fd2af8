from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .float32 import integer_decode
from .format import FORMAT
from .normalize import normalize

BIAS = FORMAT.exponent_bias


def _to_f32(value: float | np.floating) -> np.float32:
	with np.errstate(over="ignore"):
		return np.float32(value)


@dataclass(frozen=True)
class F8:
	"""An 8-bit minifloat: 1 sign bit, 3 exponent bits (bias 2), 4 significand bits.

	Values are immutable; every operator returns a new F8. Equality and hashing
	compare the raw byte, so ``F8.zero() != -F8.zero()`` even though both are zero.
	The byte with exponent field 7 and significand 0 is the saturation sentinel,
	shown as infinity by :meth:`to_f32`. There is no NaN.
	"""

	bits: int

	def __post_init__(self):
		if not 0 <= self.bits <= 0xFF:
			raise ValueError(f"F8 bits must be in [0, 255], got {self.bits}")

	@classmethod
	def new(cls, sign: int, exponent: int, significand: int) -> F8:
		"""Pack raw fields; bits beyond each field's width are truncated."""
		return cls(FORMAT.pack(sign, exponent, significand))

	@classmethod
	def from_bits(cls, bits: int) -> F8:
		return cls(int(bits))

	@classmethod
	def zero(cls) -> F8:
		return ZERO

	@classmethod
	def one(cls) -> F8:
		return ONE

	@classmethod
	def infinity(cls, sign: int = 0) -> F8:
		return cls(FORMAT.infinity(sign))

	# Accessors

	def is_zero(self) -> bool:
		return self.bits == 0

	def is_one(self) -> bool:
		return self.bits == ONE.bits

	def is_infinite(self) -> bool:
		return FORMAT.is_infinity(self.bits)

	def is_sign_negative(self) -> bool:
		return FORMAT.is_negative(self.bits)

	def is_sign_positive(self) -> bool:
		return FORMAT.is_non_negative(self.bits)

	def sign_bit(self) -> int:
		return FORMAT.sign_bit(self.bits)

	def exponent(self) -> int:
		"""Raw biased exponent field."""
		return FORMAT.exponent_field(self.bits)

	def significand(self) -> int:
		return FORMAT.significand_field(self.bits)

	def sign(self) -> int:
		"""-1, 0 or +1.

		Both zeros and any other zero significand give 0. The infinity sentinel also
		has a zero significand but keeps its sign, so this is not a significand-only sign.
		"""
		if self.significand() == 0 and not self.is_infinite():
			return 0
		return -1 if self.is_sign_negative() else 1

	def integer_decode(self) -> Tuple[int, int, int]:
		"""(significand, unbiased exponent, sign)."""
		return self.significand(), self.exponent() - BIAS, self.sign()

	# Conversions

	def to_f32(self) -> np.float32:
		if self.is_infinite():
			magnitude = np.float32(np.inf)
		else:
			magnitude = np.ldexp(np.float32(self.significand()), self.exponent() - BIAS)
		return np.float32(-magnitude if self.is_sign_negative() else magnitude)

	def __float__(self) -> float:
		return float(self.to_f32())

	@classmethod
	def exact_from_f32(cls, value: float | np.floating) -> Optional[F8]:
		"""Convert without rounding, or return None if the value is not representable.

		The float's significand is reduced to its odd form before biasing, so every
		canonical F8 (odd significand, exponent below 7, or a zero) converts back to
		itself after :meth:`to_f32`.
		"""
		f = _to_f32(value)
		sign = int(np.signbit(f))
		if np.isnan(f):
			return None
		if np.isinf(f):
			# A finite input too large for float32 is not exact.
			return cls.infinity(sign) if np.isinf(value) else None
		significand, exponent, _ = integer_decode(f)
		if significand == 0:
			return cls.new(sign, 0, 0)
		while significand & 1 == 0:
			significand >>= 1
			exponent += 1
		exponent += BIAS
		if exponent < 0:
			return None
		normalized = normalize(exponent, significand)
		if normalized != (exponent, significand):
			return None
		return cls.new(sign, *normalized)

	@classmethod
	def approx_from_f32(cls, value: float | np.floating) -> F8:
		"""Convert, truncating low significand bits until the exponent fits. Never fails."""
		f = _to_f32(value)
		sign = int(np.signbit(f))
		if np.isnan(f):
			return cls.infinity()
		if np.isinf(f):
			return cls.infinity(sign)
		significand, exponent, _ = integer_decode(f)
		shift = -BIAS - exponent
		if shift > 0:
			significand >>= shift
			exponent += shift
		return cls.new(sign, *normalize(exponent + BIAS, significand))

	# Operators

	def __neg__(self) -> F8:
		return ops.negate(self)

	def __add__(self, other):
		if not isinstance(other, F8):
			return NotImplemented
		return ops.add(self, other)

	def __sub__(self, other):
		if not isinstance(other, F8):
			return NotImplemented
		return ops.subtract(self, other)

	def __mul__(self, other):
		if not isinstance(other, F8):
			return NotImplemented
		return ops.multiply(self, other)

	def __repr__(self) -> str:
		return f"F8(sign={self.sign_bit()}, exponent={self.exponent()}, significand={self.significand()})"


ZERO = F8(0)
ONE = F8.new(0, BIAS, 1)

# Last, so that ops can import F8 from this module.
from . import ops  # noqa: E402
