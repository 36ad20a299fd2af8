from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np


@dataclass(frozen=True)
class F8Format:
	"""Bit layout of the 8-bit minifloat.

	Layout is [sign | exponent | significand] from most-significant to least-significant bits.

	- sign_bits: always 1
	- exponent_bits: width of the biased exponent field
	- significand_bits: width of the unsigned integer significand (no hidden bit)
	- exponent_bias: subtracted from the stored exponent

	Magnitude = 2^(exponent - exponent_bias) * significand. The exponent field at its
	maximum with a zero significand is the saturation sentinel ("infinity").
	"""

	sign_bits: int = 1
	exponent_bits: int = 3
	significand_bits: int = 4
	exponent_bias: int = 2

	def __post_init__(self):
		if self.sign_bits != 1:
			raise ValueError("sign_bits must be 1")
		if self.exponent_bits < 1:
			raise ValueError("exponent_bits must be >= 1")
		if self.significand_bits < 1:
			raise ValueError("significand_bits must be >= 1")
		if self.exponent_bias < 0:
			raise ValueError("exponent_bias must be >= 0")
		total_bits = self.sign_bits + self.exponent_bits + self.significand_bits
		if total_bits > 8:
			raise ValueError("sign, exponent and significand must fit in one byte")
		object.__setattr__(self, "total_bits", total_bits)
		object.__setattr__(self, "storage_dtype", np.uint8)
		# Masks and shifts
		significand_mask = (1 << self.significand_bits) - 1
		exponent_mask = (1 << self.exponent_bits) - 1
		sign_shift = self.significand_bits + self.exponent_bits
		object.__setattr__(self, "_significand_mask", significand_mask)
		object.__setattr__(self, "_exponent_mask", exponent_mask)
		object.__setattr__(self, "_sign_shift", sign_shift)
		object.__setattr__(self, "_exponent_shift", self.significand_bits)
		object.__setattr__(self, "_sign_mask", 1 << sign_shift)
		object.__setattr__(self, "max_significand", significand_mask)
		object.__setattr__(self, "max_exponent", exponent_mask)

	@property
	def dtype(self) -> np.dtype:
		return self.storage_dtype

	@property
	def sign_mask(self) -> int:
		return self._sign_mask

	def pack(self, sign: int, exponent: int, significand: int) -> int:
		"""Combine the three fields into one byte.

		Each field is masked to its width, so out-of-range bits are dropped.
		"""
		return (
			((sign & 0x1) << self._sign_shift)
			| ((exponent & self._exponent_mask) << self._exponent_shift)
			| (significand & self._significand_mask)
		)

	def sign_bit(self, bits: int) -> int:
		return (bits >> self._sign_shift) & 0x1

	def exponent_field(self, bits: int) -> int:
		return (bits >> self._exponent_shift) & self._exponent_mask

	def significand_field(self, bits: int) -> int:
		return bits & self._significand_mask

	def is_negative(self, bits: int) -> bool:
		return bits & self._sign_mask != 0

	def is_non_negative(self, bits: int) -> bool:
		return bits & self._sign_mask == 0

	def infinity(self, sign: int = 0) -> int:
		"""Packed saturation sentinel: exponent field all ones, significand zero."""
		return self.pack(sign, self.max_exponent, 0)

	def is_infinity(self, bits: int) -> bool:
		return self.exponent_field(bits) == self.max_exponent and self.significand_field(bits) == 0

	def view_fields(self, packed: np.ndarray) -> np.ndarray:
		"""Return a structured view exposing sign/exponent/significand as integer fields."""
		packed = np.asarray(packed, dtype=self.storage_dtype)
		dtype = np.dtype([
			("sign", self.storage_dtype),
			("exponent", self.storage_dtype),
			("significand", self.storage_dtype),
		])
		out = np.empty(packed.shape, dtype=dtype)
		out["sign"] = (packed >> self._sign_shift) & 0x1
		out["exponent"] = (packed >> self._exponent_shift) & self._exponent_mask
		out["significand"] = packed & self._significand_mask
		return out

	def encode(self, values: np.ndarray | float) -> np.ndarray:
		"""Lossy encode of float32 values into packed bytes (approx_from_f32 per element)."""
		from .value import F8

		if self != FORMAT:
			raise ValueError("encode is only defined for the default F8 layout")
		floats = np.asarray(values, dtype=np.float32)
		approx = np.frompyfunc(lambda f: F8.approx_from_f32(f).bits, 1, 1)
		return np.asarray(approx(floats), dtype=self.storage_dtype)

	def decode(self, packed: np.ndarray | int) -> np.ndarray:
		"""Decode packed bytes to float32 through a 256-entry lookup table."""
		p = np.asarray(packed, dtype=self.storage_dtype)
		return _decode_table(self)[p]

	def storage_info(self) -> Dict[str, int | np.dtype]:
		return {
			"total_bits": self.total_bits,
			"dtype": self.storage_dtype,
			"sign_bits": self.sign_bits,
			"exponent_bits": self.exponent_bits,
			"significand_bits": self.significand_bits,
			"exponent_bias": self.exponent_bias,
		}


def _decode_table(fmt: F8Format) -> np.ndarray:
	table = _DECODE_TABLES.get(fmt)
	if table is None:
		bits = np.arange(1 << fmt.total_bits, dtype=np.int32)
		sign = (bits >> fmt._sign_shift) & 0x1
		exp_field = (bits >> fmt._exponent_shift) & fmt._exponent_mask
		significand = bits & fmt._significand_mask
		magnitude = np.ldexp(significand.astype(np.float64), exp_field - fmt.exponent_bias)
		magnitude[(exp_field == fmt.max_exponent) & (significand == 0)] = np.inf
		table = np.copysign(magnitude, 1.0 - 2.0 * sign).astype(np.float32)
		_DECODE_TABLES[fmt] = table
	return table


_DECODE_TABLES: Dict[F8Format, np.ndarray] = {}

FORMAT = F8Format()
