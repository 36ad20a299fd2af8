import numpy as np

from f8 import F8, FORMAT, ONE, ZERO
from f8.ops import add_packed, multiply_packed


def main() -> None:
	print("Format:", FORMAT.storage_info())

	print("zero:", ZERO, float(ZERO))
	print("one:", ONE, float(ONE))
	print("one + one:", ONE + ONE, float(ONE + ONE))
	print("one * one:", ONE * ONE)
	print("one - one:", ONE - ONE, (ONE - ONE) == ZERO)
	print("-zero == zero:", -ZERO == ZERO)

	for value in (0.5, 2.0, 0.012, 0.002, 1e10):
		print(f"exact_from_f32({value}):", F8.exact_from_f32(value), " approx:", F8.approx_from_f32(value))

	x = np.array([0.0, -0.0, 0.25, 0.5, 1.0, -1.0, 1.5, 3.75, 10.0, np.inf, -np.inf, np.nan], dtype=np.float32)
	packed = FORMAT.encode(x)
	decoded = FORMAT.decode(packed)

	print("Original:", x)
	print("Packed (uint):", packed)
	print("Decoded:", decoded)

	fields = FORMAT.view_fields(packed)
	print("Fields sample (first 5):")
	print(fields[:5])

	print("Sum decoded:", FORMAT.decode(add_packed(packed, packed)))
	print("Prod decoded:", FORMAT.decode(multiply_packed(packed, packed)))


if __name__ == "__main__":
	main()
