from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class SelectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    pick_tolerance: float = 0.25  # world units

    @field_validator("pick_tolerance")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("pick_tolerance must be > 0")
        return v


class CameraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    zoom: float = 0.25
    zoom_step: float = 1.5
    cooldown_s: float = 0.25

    @field_validator("zoom", "zoom_step")
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("cooldown_s")
    @classmethod
    def _nonneg(cls, v: float) -> float:
        if v < 0:
            raise ValueError("cooldown_s must be >= 0")
        return v


# ----------------- TOPOLOGIES ---------------------


class SimpleTopologyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["simple"] = "simple"


class GridTopologyModel(BaseModel):
    """
    Defaults fill the view of a 1024x768 window at zoom 0.25, which spans
    roughly (-5.33, -4.0) to (5.33, 4.0) in world units.
    """

    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    cols: int = 18
    rows: int = 14
    disp_x: float = 0.5
    disp_y: float = 0.5
    start_x: float = -4.25
    start_y: float = 0.75
    viewport_height: float = 4.0
    weight_min: int = 10
    weight_max: int = 15

    @field_validator("cols", "rows")
    def _at_least_one(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @model_validator(mode="after")
    def _check_weights(self):
        if self.weight_min < 0:
            raise ValueError("weight_min must be >= 0")
        if self.weight_max < self.weight_min:
            raise ValueError(
                f"weight_max ({self.weight_max}) must be >= weight_min ({self.weight_min})"
            )
        return self

    @property
    def weight_range(self) -> tuple[int, int]:
        return self.weight_min, self.weight_max


class MazeTopologyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["maze"] = "maze"
    base: GridTopologyModel = Field(default_factory=GridTopologyModel)


TopologyUnion = Annotated[
    SimpleTopologyModel | GridTopologyModel | MazeTopologyModel,
    Field(discriminator="kind"),
]

# ------------------------------------------------------------------


class DemoModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "pathgrid"
    seed: int = 123
    topology: TopologyUnion = Field(default_factory=GridTopologyModel)
    selection: SelectionModel = SelectionModel()
    camera: CameraModel = CameraModel()
    log: LogModel = LogModel()
