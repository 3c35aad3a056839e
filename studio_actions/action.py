"""
.. autoclass:: studio_actions.action.Action
    :members:
"""
from studio_actions.specs import flag_spec, integral_spec, read_field, text_spec, timer_mode_spec
from studio_actions.enums import TimerMode

from studio_protocol.codec import hex_to_bytes, resolve_escape_sequences, text_to_bytes
from studio_app import helpers as hp

import logging

log = logging.getLogger("studio_actions.action")

DEFAULT_ICON = "Play Property"
DEFAULT_TIMER_INTERVAL_MS = 100

RECORD_KEYS = (
    "icon",
    "txData",
    "eol",
    "binary",
    "title",
    "timerIntervalMs",
    "timerMode",
    "autoExecuteOnConnect",
)


class Action:
    """
    A command the user wants to send to the connected device.

    action_id
        The position of this action in the project. It is given when the
        action is created and can't be changed afterwards.

    icon and title
        What the user sees for this action. Whitespace in these is always
        simplified.

    tx_data
        Either hex digits if ``binary_data`` is True, otherwise text that may
        contain escape tokens like ``\\r`` and ``\\n``.

    eol_sequence
        Text with escape tokens that is sent after ``tx_data``.

    timer_mode, timer_interval_ms and auto_execute_on_connect
        Stored for whatever schedules the sending of this action.
    """

    def __init__(self, action_id):
        self._action_id = action_id
        self.binary_data = False
        self.icon = DEFAULT_ICON
        self.title = ""
        self.tx_data = ""
        self.eol_sequence = ""
        self.timer_interval_ms = DEFAULT_TIMER_INTERVAL_MS
        self.timer_mode = TimerMode.OFF
        self.auto_execute_on_connect = False

    @property
    def action_id(self):
        return self._action_id

    @property
    def icon(self):
        return self._icon

    @icon.setter
    def icon(self, val):
        self._icon = hp.simplified(val)

    @property
    def title(self):
        return self._title

    @title.setter
    def title(self, val):
        self._title = hp.simplified(val)

    def tx_bytes(self):
        """
        Return the bytes to send to the device.

        If ``binary_data`` is True then ``tx_data`` is treated as hex digits,
        otherwise escape tokens are resolved and the result is utf-8 encoded
        with any lone surrogates replaced by U+FFFD.

        The ``eol_sequence`` always has its escape tokens resolved and is
        added to the end.
        """
        if self.binary_data:
            bts = hex_to_bytes(self.tx_data)
        else:
            bts = text_to_bytes(resolve_escape_sequences(self.tx_data))

        if self.eol_sequence:
            bts += text_to_bytes(resolve_escape_sequences(self.eol_sequence))

        return bts

    def serialize(self):
        """Return a dictionary suitable for storing in a project file"""
        return {
            "icon": hp.simplified(self.icon),
            "txData": self.tx_data,
            "eol": self.eol_sequence,
            "binary": self.binary_data,
            "title": hp.simplified(self.title),
            "timerIntervalMs": self.timer_interval_ms,
            "timerMode": int(self.timer_mode),
            "autoExecuteOnConnect": self.auto_execute_on_connect,
        }

    def read(self, record):
        """
        Fill in this action from a dictionary made by ``serialize``.

        Returns False and changes nothing if the record is empty. Otherwise
        missing or invalid values are replaced with defaults and we return
        True.
        """
        if not isinstance(record, dict) or not record:
            return False

        # fmt: off
        self.eol_sequence            = read_field(record, "eol", text_spec(), "")
        self.tx_data                 = read_field(record, "txData", text_spec(), "")
        self.binary_data             = read_field(record, "binary", flag_spec(), False)
        self.timer_interval_ms       = read_field(record, "timerIntervalMs", integral_spec(), DEFAULT_TIMER_INTERVAL_MS)
        self.icon                    = read_field(record, "icon", text_spec(), "")
        self.title                   = read_field(record, "title", text_spec(), "")
        self.auto_execute_on_connect = read_field(record, "autoExecuteOnConnect", flag_spec(), False)
        self.timer_mode              = read_field(record, "timerMode", timer_mode_spec(), TimerMode.OFF)
        # fmt: on

        if self.timer_interval_ms <= 0 and self.timer_mode is not TimerMode.OFF:
            log.warning(
                hp.lc(
                    "Timer interval is not positive",
                    action_id=self.action_id,
                    timer_interval_ms=self.timer_interval_ms,
                )
            )

        return True

    def __repr__(self):
        return f"<Action {self.action_id}:{self.title!r}>"
