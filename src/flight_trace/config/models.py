import os
from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- NETWORK ---------------------


class RouteModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)
    time: float
    price: float

    @field_validator("time", "price")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v < 0:
            raise ValueError(f"{info.field_name} must be finite and >= 0")
        return v


class NetworkByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    airports: str
    routes: str

    @field_validator("airports", "routes")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class NetworkInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    airports: list[str]
    routes: list[RouteModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_indices(self):
        n = len(self.airports)
        for k, r in enumerate(self.routes):
            if r.from_index >= n or r.to_index >= n:
                raise ValueError(f"route {k} references an airport index >= {n}")
        return self


NetworkRef = Annotated[NetworkByPath | NetworkInline, Field(discriminator="by")]


# ----------------- SEARCH ---------------------


class SearchBfsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class SearchUcsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["ucs"] = "ucs"
    weight: Literal["time", "price"] = "price"


SearchUnion = Annotated[SearchBfsModel | SearchUcsModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    network: NetworkRef
    search: SearchUnion = Field(default_factory=SearchBfsModel)
    start: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    log: LogModel = LogModel()
