from typing import Any, Dict, List, Optional, Type, TypeVar

import numpy as np
import ujson
from pydantic import BaseModel, ConfigDict, conint, field_serializer, model_validator

__all__ = [
    'SerialisableBaseModel',
    'TesterConfig',
    'TrialReport',
    'DictionaryNotFound',
    'EmptyDictionary',
    'HashOutOfRange',
]

C = TypeVar('C')


class SerialisableBaseModel(BaseModel):
    """
    A pydantic BaseModel that can be serialised and deserialised using pickle and ujson.
    """
    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    @classmethod
    def _deserialise(cls, kwargs):
        """Required for this class's __reduce__ method to be picklable."""
        return cls.parse_obj(kwargs)

    @classmethod
    def parse_obj(cls: Type[C], obj: Dict[str, Any]) -> C:
        # Convert all fields that are declared as np.ndarray
        obj = dict(obj)
        for name, field in cls.model_fields.items():
            if _is_ndarray_annotation(field.annotation) and isinstance(obj.get(name), list):
                obj[name] = np.asarray(obj[name])
        return cls.model_validate(obj)

    def to_json(self) -> str:
        # ujson decodes NaN and Infinity, and numpy arrays are dumped as lists by the field serialisers
        return ujson.dumps(self.model_dump())

    @classmethod
    def from_json(cls: Type[C], s: str) -> C:
        return cls.parse_obj(ujson.loads(s))

    def __reduce__(self):
        # Uses the dict representation of the model to serialise and deserialise.
        serialised_data = self.model_dump()
        return self.__class__._deserialise, (serialised_data,)


def _is_ndarray_annotation(annotation) -> bool:
    if isinstance(annotation, type):
        return issubclass(annotation, np.ndarray)
    # Optional[np.ndarray]
    return any(isinstance(arg, type) and issubclass(arg, np.ndarray) for arg in getattr(annotation, '__args__', ()))


class TesterConfig(SerialisableBaseModel):
    """
    Constants of a hash function test run.
    """
    __test__ = False  # not a pytest test class

    dictionary_path: str = './words.txt'
    bucket_count: conint(ge=2) = 65536
    segment_count: conint(ge=1) = 16
    histogram_height: conint(ge=2) = 10
    histogram_width: conint(ge=2) = 70
    show_histogram: bool = True
    report_path: Optional[str] = None  # if set, trial reports are written here as JSON lines

    @model_validator(mode='after')
    def segments_must_divide_buckets(self):
        if self.bucket_count % self.segment_count != 0:
            raise ValueError(
                f"bucket_count {self.bucket_count} is not divisible into {self.segment_count} segments."
            )
        return self

    @property
    def degrees_of_freedom(self) -> int:
        return self.bucket_count - 1


class TrialReport(SerialisableBaseModel):
    """
    The outcome of testing one hash function against the dictionary.
    """
    name: str
    num_words: conint(ge=1)
    chi_square: float
    degrees_of_freedom: conint(ge=1)
    p_value: float  # chi-squared CDF at chi_square
    upper_tail: float  # 1 - p_value, probability of a distribution at least as skewed
    segments: Optional[np.ndarray] = None  # None when the histogram is suppressed

    @field_serializer('segments')
    def serialise_segments(self, segments: Optional[np.ndarray]) -> Optional[List[int]]:
        if segments is None:
            return None
        return segments.tolist()

    def __eq__(self, other):
        if not isinstance(other, TrialReport):
            return NotImplemented
        this = self.model_dump()
        that = other.model_dump()
        return this == that


class DictionaryNotFound(Exception):
    """
    Exception raised when the dictionary file can not be opened.
    """
    pass


class EmptyDictionary(Exception):
    """
    Exception raised when there are no words to hash, so no expected bucket count exists.
    """
    pass


class HashOutOfRange(Exception):
    """
    Exception raised when a hash function returns a value outside [0, bucket_count).
    """
    pass
