from .format import F8Format, FORMAT
from .normalize import normalize
from .value import F8, ZERO, ONE, BIAS
from .ops import add, subtract, multiply, negate, add_packed, subtract_packed, multiply_packed, negate_packed

__all__ = [
	"F8",
	"F8Format",
	"FORMAT",
	"BIAS",
	"ZERO",
	"ONE",
	"normalize",
	"add",
	"subtract",
	"multiply",
	"negate",
	"add_packed",
	"subtract_packed",
	"multiply_packed",
	"negate_packed",
]
