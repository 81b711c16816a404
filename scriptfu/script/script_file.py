"""Loads script registrations from JSON files.

A script file holds a list of registrations:

    [
        {
            "name": "script-fu-drop-shadow",
            "menu_label": "<Image>/Filters/Light and Shadow/_Drop Shadow...",
            "blurb": "Add a drop shadow to the selected region",
            "author": "Sven Neumann",
            "copyright": "Sven Neumann",
            "date": "1999/12/21",
            "image_types": "RGB* GRAY*",
            "args": [
                ["SF-IMAGE", "Image", 0],
                ["SF-ADJUSTMENT", "Blur radius", [15, 0, 1024, 1, 10, 0, 1]]
            ]
        }
    ]
"""
import json
import logging

from scriptfu.script.registration import register_script
from scriptfu.script.script import Script

logger = logging.getLogger(__name__)

NAME_KEY = 'name'
MENU_LABEL_KEY = 'menu_label'
BLURB_KEY = 'blurb'
AUTHOR_KEY = 'author'
COPYRIGHT_KEY = 'copyright'
DATE_KEY = 'date'
IMAGE_TYPES_KEY = 'image_types'
ARGS_KEY = 'args'


def load_scripts(path: str) -> list[Script]:
    """Reads and registers every script in a JSON script file.

    Raises
    ------
    RuntimeError
        If the file isn't valid JSON or isn't a list of registrations.
    ValueError
        If any registration is invalid.
    """
    try:
        with open(path, encoding='utf-8') as file:
            json_data = json.load(file)
    except json.JSONDecodeError as err:
        raise RuntimeError(f'Reading script file {path} failed: {err}') from err
    if not isinstance(json_data, list):
        raise RuntimeError(f'Script file {path} must contain a list of script registrations')
    scripts = []
    for i, registration in enumerate(json_data):
        if not isinstance(registration, dict):
            raise RuntimeError(f'Script file {path}: entry {i} is not a script registration')
        try:
            scripts.append(register_script(registration[NAME_KEY],
                                           registration.get(MENU_LABEL_KEY, ''),
                                           registration.get(BLURB_KEY, ''),
                                           registration.get(AUTHOR_KEY, ''),
                                           registration.get(COPYRIGHT_KEY, ''),
                                           registration.get(DATE_KEY, ''),
                                           registration.get(IMAGE_TYPES_KEY, ''),
                                           [tuple(declaration) for declaration in registration.get(ARGS_KEY, [])]))
        except KeyError as err:
            raise RuntimeError(f'Script file {path}: entry {i} is missing {err}') from err
    logger.info(f'Loaded {len(scripts)} scripts from {path}')
    return scripts
