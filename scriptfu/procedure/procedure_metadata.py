"""Host-agnostic description of a procedure generated from a script."""
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Optional


class ProcedureType(StrEnum):
    """Lifetime of an installed procedure."""
    TEMPORARY = 'temporary'  # Owned by the running extension, removed when it exits.
    PLUGIN = 'plugin'  # Persistent, reported back to the host when it queries the extension.


class HostParamType(StrEnum):
    """Parameter value types understood by the host procedure registry."""
    RUN_MODE = 'run-mode'
    IMAGE = 'image'
    DRAWABLE = 'drawable'
    LAYER = 'layer'
    CHANNEL = 'channel'
    VECTORS = 'vectors'
    DISPLAY = 'display'
    RGB = 'rgb'
    BOOLEAN = 'boolean'
    STRING = 'string'
    DOUBLE = 'double'
    INT = 'int'


@dataclass
class ProcedureParameter:
    """A single procedure parameter."""
    name: str
    nick: str
    blurb: str
    param_type: HostParamType
    default: Any = None
    minimum: Optional[float | int] = None
    maximum: Optional[float | int] = None
    none_ok: bool = False  # object parameters may be passed without a value
    no_validate: bool = False  # the host should accept the value as given


@dataclass
class ProcedureMetadata:
    """Everything the host registry needs to install a script procedure."""
    name: str
    proc_type: ProcedureType
    image_types: str
    menu_label: Optional[str]
    blurb: str
    help: Optional[str]
    help_id: str
    author: str
    copyright: str
    date: str
    parameters: list[ProcedureParameter] = field(default_factory=list)

    @property
    def parameter_names(self) -> list[str]:
        """Returns the machine-readable names of all parameters, including the run mode."""
        return [param.name for param in self.parameters]

    def get_parameter(self, name: str) -> ProcedureParameter:
        """Returns the parameter with a given name."""
        for param in self.parameters:
            if param.name == name:
                return param
        raise KeyError(f'Procedure {self.name} has no parameter "{name}"')
