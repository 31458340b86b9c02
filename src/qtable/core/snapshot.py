from __future__ import annotations

from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import QConfig
from .value import QValue


class QConfigPayload(BaseModel):
    # decayed parameters are unbounded: keep inf/nan as JSON Infinity/NaN instead of null
    model_config = ConfigDict(ser_json_inf_nan="constants")

    state_size: int = Field(..., ge=0, description="Number of states (rows)")
    action_size: int = Field(..., ge=0, description="Number of actions (columns)")
    gamma: float = Field(..., description="Discount factor")
    alpha: float = Field(..., description="Learning rate")
    epsilon: float = Field(..., description="Exploration rate")


class QTableSnapshot(BaseModel):
    """
    JSON form of a QTable: its configuration and the full grid, row by row.

    The grid shape is checked against the stored dimensions and every cell goes through
    the QValue range check, so a snapshot that validates can always be turned back into a table.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    config: QConfigPayload = Field(..., description="Dimensions and learning parameters")
    qvalues: list[list[float]] = Field(
        ..., description="Grid of Q-values, qvalues[state][action]"
    )

    @model_validator(mode="after")
    def _check_grid(self) -> QTableSnapshot:
        if len(self.qvalues) != self.config.state_size:
            raise ValueError(
                f"qvalues has {len(self.qvalues)} rows, expected state_size={self.config.state_size}"
            )
        for state, row in enumerate(self.qvalues):
            if len(row) != self.config.action_size:
                raise ValueError(
                    f"qvalues[{state}] has {len(row)} entries, expected action_size={self.config.action_size}"
                )
            for value in row:
                QValue(value)
        return self

    def to_config(self) -> QConfig:
        return QConfig(**self.config.model_dump())


def write_snapshot(snapshot: QTableSnapshot, file_path: str | Path) -> None:
    """
    Write a snapshot as JSON. Filesystem errors (OSError) propagate to the caller.

    :param snapshot: Snapshot to write.
        :type snapshot: QTableSnapshot
    :param file_path: Destination file.
        :type file_path: str | Path

    :return: None.
        :rtype: None
    """
    Path(file_path).write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")


def read_snapshot(file_path: str | Path) -> QTableSnapshot:
    """
    Read and validate a JSON snapshot.

    :param file_path: Source file.
        :type file_path: str | Path

    :return: Validated snapshot.
        :rtype: QTableSnapshot

    :raises OSError: If the file cannot be read.
    :raises pydantic.ValidationError: If the content is not a valid snapshot.
    """
    return QTableSnapshot.model_validate_json(Path(file_path).read_text(encoding="utf-8"))
