"""
Generation constants for the greebler.

These models hold the stamping magnitudes and the probabilities used by the
region partitioner. Defaults reproduce the classic groovy-greebler look;
override them to get deeper grooves or busier panels.
"""

from pydantic import BaseModel, Field, model_validator


class StampProfile(BaseModel):
    """Magnitudes and shape parameters for primitive stamping."""

    # Height deltas (multiplied by polarity)
    groove_depth: int = Field(default=30, ge=0, description="Groove centerline delta")
    groove_shoulder: int = Field(default=15, ge=0, description="Groove side delta")
    rectangle_fill: int = Field(default=30, ge=0, description="Rectangle interior delta")
    rectangle_border: int = Field(default=15, ge=0, description="Rectangle border delta")
    circle_fill: int = Field(default=20, ge=0, description="Circle disk delta")
    sector_edge: int = Field(default=20, ge=0, description="Annulus sector outline delta")

    # Recursion hooks
    rectangle_delegate_chance: int = Field(
        default=5, ge=1, description="1-in-N chance a rectangle is partitioned instead of drawn"
    )

    # Circle subdivision
    inner_radius_min: float = Field(default=0.3, gt=0.0, lt=1.0, description="Lowest inner/outer ratio")
    inner_radius_max: float = Field(default=0.8, gt=0.0, lt=1.0, description="Highest inner/outer ratio")
    sector_steps_min: int = Field(default=10, ge=1, description="Fewest sectors per ring")
    sector_steps_max: int = Field(default=20, ge=1, description="Most sectors per ring")

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.inner_radius_min > self.inner_radius_max:
            raise ValueError("inner_radius_min must not exceed inner_radius_max")
        if self.sector_steps_min > self.sector_steps_max:
            raise ValueError("sector_steps_min must not exceed sector_steps_max")
        return self


class PartitionProfile(BaseModel):
    """Decision weights for the recursive region partitioner."""

    early_leaf_chance: int = Field(
        default=5, ge=1, description="1-in-N chance a mid-sized region stops splitting"
    )
    early_leaf_factor: int = Field(
        default=8, ge=1, description="Regions shorter than factor*limit may stop early"
    )
    split_jitter: float = Field(
        default=0.25, ge=0.0, lt=0.5, description="Split offset as a fraction of the extent"
    )
    leaf_options: int = Field(default=4, ge=1, description="Number of weighted leaf fill options")
    rectangle_options: int = Field(
        default=3, ge=0, description="Leaf options that pick a rectangle row; the rest pick circles"
    )
    max_rectangles: int = Field(default=9, ge=0, description="Most rectangles in a leaf row")
    circle_radius_ratio: float = Field(
        default=0.45, gt=0.0, le=0.5, description="Circle radius relative to the shorter span"
    )


class ScatterOptions(BaseModel):
    """Counts for the random scatter passes run after partitioning."""

    grooves: int = Field(default=0, ge=0, description="Random grooves across the field")
    rectangles: int = Field(default=0, ge=0, description="Random free-standing rectangles")
    circles: int = Field(default=0, ge=0, description="Random free-standing circles")
    rows: int = Field(default=0, ge=0, description="Random rows of random primitives")

    @property
    def total(self) -> int:
        return self.grooves + self.rectangles + self.circles + self.rows


DEFAULT_STAMP_PROFILE = StampProfile()
DEFAULT_PARTITION_PROFILE = PartitionProfile()
