"""A registered script: its metadata and its ordered list of declared arguments."""
import logging
from contextlib import contextmanager
from threading import Lock
from typing import Optional, Iterator, Sequence

from scriptfu.script.script_arg import ScriptArg
from scriptfu.util.text_utils import strip_mnemonics, strip_trailing_ellipsis

logger = logging.getLogger(__name__)


class Script:
    """A registered script: its metadata and its ordered list of declared arguments.

    Argument values are shared between invocations, so operations on a single script must never overlap. Every
    operation that reads or changes argument values runs inside `exclusive_access`, which fails immediately
    instead of waiting if the script is already in use.
    """

    def __init__(self,
                 name: str,
                 menu_label: str,
                 blurb: str,
                 author: str,
                 copyright_notice: str,
                 date: str,
                 image_types: str,
                 n_args: int) -> None:
        """Creates a script with `n_args` argument slots that must be filled with set_arg before use.

        Parameters
        ----------
        name: str
            Unique procedure name.
        menu_label: str
            Menu path and label, or a label starting with "<None>" if the script shouldn't appear in menus.
        blurb: str
            Short description of what the script does.
        author: str
            Script author.
        copyright_notice: str
            Script copyright holder.
        date: str
            Script date or version string.
        image_types: str
            Image types the script can operate on, e.g. "RGB*, GRAY*", or an empty string.
        n_args: int
            Number of declared arguments.
        """
        assert n_args >= 0, f'Invalid argument count {n_args} for script {name}'
        self._name: Optional[str] = name
        self._menu_label: Optional[str] = menu_label
        self._blurb: Optional[str] = blurb
        self._author: Optional[str] = author
        self._copyright: Optional[str] = copyright_notice
        self._date: Optional[str] = date
        self._image_types: Optional[str] = image_types
        self._args: list[Optional[ScriptArg]] = [None] * n_args
        self._access_lock = Lock()
        self._destroyed = False

    @staticmethod
    def create(name: str,
               menu_label: str,
               blurb: str,
               author: str,
               copyright_notice: str,
               date: str,
               image_types: str,
               args: Sequence[ScriptArg]) -> 'Script':
        """Creates a script with all of its arguments defined."""
        script = Script(name, menu_label, blurb, author, copyright_notice, date, image_types, len(args))
        for i, arg in enumerate(args):
            script.set_arg(i, arg)
        return script

    @property
    def name(self) -> str:
        """Returns the script's unique procedure name."""
        self._assert_alive()
        assert self._name is not None
        return self._name

    @property
    def menu_label(self) -> str:
        """Returns the script's menu path and label."""
        self._assert_alive()
        assert self._menu_label is not None
        return self._menu_label

    @property
    def blurb(self) -> str:
        """Returns the script's short description."""
        self._assert_alive()
        assert self._blurb is not None
        return self._blurb

    @property
    def author(self) -> str:
        """Returns the script's author."""
        self._assert_alive()
        assert self._author is not None
        return self._author

    @property
    def copyright(self) -> str:
        """Returns the script's copyright holder."""
        self._assert_alive()
        assert self._copyright is not None
        return self._copyright

    @property
    def date(self) -> str:
        """Returns the script's date string."""
        self._assert_alive()
        assert self._date is not None
        return self._date

    @property
    def image_types(self) -> str:
        """Returns the image types the script accepts."""
        self._assert_alive()
        assert self._image_types is not None
        return self._image_types

    @property
    def n_args(self) -> int:
        """Returns the number of declared arguments."""
        return len(self._args)

    @property
    def args(self) -> list[ScriptArg]:
        """Returns the declared arguments in order. Fails if any argument slot was never filled."""
        self._assert_complete()
        return [arg for arg in self._args if arg is not None]

    @property
    def is_destroyed(self) -> bool:
        """Returns whether destroy() was called."""
        return self._destroyed

    def get_arg(self, index: int) -> ScriptArg:
        """Returns the argument at an index."""
        self._assert_alive()
        arg = self._args[index]
        assert arg is not None, f'Script {self._name}: argument {index} was never defined'
        return arg

    def set_arg(self, index: int, arg: ScriptArg) -> None:
        """Defines the argument at an index."""
        self._assert_alive()
        assert 0 <= index < len(self._args), f'Script {self._name}: invalid argument index {index}'
        self._args[index] = arg

    @contextmanager
    def exclusive_access(self) -> Iterator['Script']:
        """Holds the script's access lock for the duration of the context."""
        self._assert_alive()
        if not self._access_lock.acquire(blocking=False):
            raise RuntimeError(f'Concurrent access to script {self._name} detected!')
        try:
            yield self
        finally:
            self._access_lock.release()

    def get_title(self) -> str:
        """Returns a title for the script, derived from its menu label.

        Menu mnemonics are removed. If the label is a full menu path like "<Image>/Filters/Blur/Gaussian Blur...",
        only the last part is kept. An ellipsis at the end of the title is removed.
        """
        title = strip_mnemonics(self.menu_label)
        if title.startswith('<'):
            separator_index = title.rfind('/')
            if 0 <= separator_index < len(title) - 1:
                title = title[separator_index + 1:]
        return strip_trailing_ellipsis(title)

    def reset(self, reset_ids: bool) -> None:
        """Restores argument values to their defaults.

        Image, drawable, layer, channel, vectors and display arguments are only restored if reset_ids is True.
        All other arguments are always restored.
        """
        with self.exclusive_access():
            for arg in self.args:
                arg.reset(reset_ids)

    def destroy(self) -> None:
        """Releases all script metadata and argument values. The script can't be used afterwards."""
        with self.exclusive_access():
            logger.debug(f'Destroying script {self._name}')
            for arg in self._args:
                if arg is not None:
                    arg.release()
            self._args = []
            self._name = None
            self._menu_label = None
            self._blurb = None
            self._author = None
            self._copyright = None
            self._date = None
            self._image_types = None
            self._destroyed = True

    def _assert_alive(self) -> None:
        assert not self._destroyed, 'Tried to use a destroyed script'

    def _assert_complete(self) -> None:
        self._assert_alive()
        for i, arg in enumerate(self._args):
            assert arg is not None, f'Script {self._name}: argument {i} was never defined'
