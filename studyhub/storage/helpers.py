import json
from dataclasses import asdict, is_dataclass
from enum import Enum


class EnumEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, Enum):
			return o.value
		if is_dataclass(o) and not isinstance(o, type):
			return asdict(o)
		return super().default(o)


def to_jsonable(value):
	"""Round-trip through the encoder so dataclasses and enums become plain JSON types."""
	return json.loads(json.dumps(value, cls=EnumEncoder))
