"""Builds host procedure metadata from a script's declared arguments."""
import logging
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication

from scriptfu.procedure.host_types import RunMode
from scriptfu.procedure.procedure_metadata import ProcedureMetadata, ProcedureParameter, ProcedureType, \
    HostParamType
from scriptfu.script.arg_type import ArgType
from scriptfu.script.script import Script
from scriptfu.script.script_arg import ScriptArg
from scriptfu.util.shared_constants import NO_MENU_LABEL, FLOAT_MIN, FLOAT_MAX, INT_MIN, INT_MAX

logger = logging.getLogger(__name__)

# The `QCoreApplication.translate` context for strings in this file
TR_ID = 'procedure.procedure_builder'


def _tr(*args):
    """Helper to make `QCoreApplication.translate` more concise."""
    return QCoreApplication.translate(TR_ID, *args)


RUN_MODE_PARAM_NAME = 'run-mode'
RUN_MODE_PARAM_NICK = _tr('Run mode')
RUN_MODE_PARAM_BLURB = _tr('The run mode')


def get_menu_label(script: Script) -> Optional[str]:
    """Returns the label the procedure should be added to menus with, or None if it shouldn't be in any menu."""
    menu_label = script.menu_label
    if menu_label[:len(NO_MENU_LABEL)] == NO_MENU_LABEL or len(menu_label) == 0:
        return None
    return menu_label


def unique_param_names(arg_types: Sequence[ArgType]) -> list[tuple[str, str]]:
    """Returns a unique (name, nickname) pair for each argument type in a sequence.

    The first argument of each type gets the type's base name and nickname. Later arguments of the same type get
    their occurrence count appended, e.g. "image", "image-2", "image-3" with nicknames "Image", "Image 2",
    "Image 3".
    """
    type_counts: dict[ArgType, int] = {}
    names = []
    for arg_type in arg_types:
        count = type_counts.get(arg_type, 0) + 1
        type_counts[arg_type] = count
        if count == 1:
            names.append((arg_type.param_name, arg_type.param_nick))
        else:
            names.append((f'{arg_type.param_name}-{count}', f'{arg_type.param_nick} {count}'))
    return names


def build_parameter(arg: ScriptArg, name: str, nick: str) -> ProcedureParameter:
    """Creates the procedure parameter that passes a value for one script argument."""
    blurb = arg.label
    match arg.arg_type:
        case ArgType.IMAGE:
            return ProcedureParameter(name, nick, blurb, HostParamType.IMAGE, none_ok=True)
        case ArgType.DRAWABLE:
            return ProcedureParameter(name, nick, blurb, HostParamType.DRAWABLE, none_ok=True)
        case ArgType.LAYER:
            return ProcedureParameter(name, nick, blurb, HostParamType.LAYER, none_ok=True)
        case ArgType.CHANNEL:
            return ProcedureParameter(name, nick, blurb, HostParamType.CHANNEL, none_ok=True)
        case ArgType.VECTORS:
            return ProcedureParameter(name, nick, blurb, HostParamType.VECTORS, none_ok=True)
        case ArgType.DISPLAY:
            return ProcedureParameter(name, nick, blurb, HostParamType.DISPLAY, none_ok=True)
        case ArgType.COLOR:
            return ProcedureParameter(name, nick, blurb, HostParamType.RGB)
        case ArgType.TOGGLE:
            return ProcedureParameter(name, nick, blurb, HostParamType.BOOLEAN, default=False)
        case ArgType.VALUE | ArgType.STRING | ArgType.TEXT | ArgType.FONT | ArgType.PALETTE | ArgType.PATTERN \
                | ArgType.BRUSH | ArgType.GRADIENT:
            return ProcedureParameter(name, nick, blurb, HostParamType.STRING)
        case ArgType.FILENAME | ArgType.DIRNAME:
            return ProcedureParameter(name, nick, blurb, HostParamType.STRING, no_validate=True)
        case ArgType.ADJUSTMENT:
            return ProcedureParameter(name, nick, blurb, HostParamType.DOUBLE, default=0.0, minimum=FLOAT_MIN,
                                      maximum=FLOAT_MAX)
        case ArgType.OPTION | ArgType.ENUM:
            return ProcedureParameter(name, nick, blurb, HostParamType.INT, default=0, minimum=INT_MIN,
                                      maximum=INT_MAX)
    raise ValueError(f'Unhandled argument type {arg.arg_type}')


def build_procedure(script: Script, proc_type: ProcedureType = ProcedureType.TEMPORARY) -> ProcedureMetadata:
    """Creates the metadata for a procedure that runs a script.

    The first procedure parameter is always the run mode, followed by one parameter for each declared script
    argument, in order.
    """
    assert script is not None
    logger.debug(f'build_procedure: {script.name} of type {proc_type}')
    metadata = ProcedureMetadata(name=script.name,
                                 proc_type=proc_type,
                                 image_types=script.image_types,
                                 menu_label=get_menu_label(script),
                                 blurb=script.blurb,
                                 help=None,
                                 help_id=script.name,
                                 author=script.author,
                                 copyright=script.copyright,
                                 date=script.date)
    metadata.parameters.append(ProcedureParameter(RUN_MODE_PARAM_NAME, RUN_MODE_PARAM_NICK, RUN_MODE_PARAM_BLURB,
                                                  HostParamType.RUN_MODE, default=RunMode.INTERACTIVE))
    args = script.args
    for arg, (name, nick) in zip(args, unique_param_names([arg.arg_type for arg in args])):
        metadata.parameters.append(build_parameter(arg, name, nick))
    return metadata
