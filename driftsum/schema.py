"""
Structured (field-based) serialization adapter.

Pydantic models mirroring Vector and CompensatedAccumulator for interchange
with JSON and other generic tooling. These encodings are for inspection and
debugging only: they are not byte-stable and must never be fed to
:func:`driftsum.encoding.state_digest` or used for determinism checks.
"""

from pydantic import BaseModel, Field

from .core import CompensatedAccumulator
from .vector import Vector


class VectorModel(BaseModel):
    """Field-based form of a Vector."""

    x: float = Field(..., description="First component")
    y: float = Field(..., description="Second component")
    z: float = Field(..., description="Third component")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @classmethod
    def from_vector(cls, vector: Vector) -> "VectorModel":
        return cls(x=vector.x, y=vector.y, z=vector.z)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y, self.z)


class AccumulatorModel(BaseModel):
    """Field-based form of the exact accumulator state."""

    sum: VectorModel = Field(..., description="Running sum")
    compensation: VectorModel = Field(..., description="Pending rounding correction")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @classmethod
    def from_accumulator(cls, accumulator: CompensatedAccumulator) -> "AccumulatorModel":
        return cls(
            sum=VectorModel.from_vector(accumulator.sum),
            compensation=VectorModel.from_vector(accumulator.compensation),
        )

    def to_accumulator(self) -> CompensatedAccumulator:
        """Rebuild an accumulator with this state."""
        return CompensatedAccumulator.restore(self.sum.to_vector(), self.compensation.to_vector())
