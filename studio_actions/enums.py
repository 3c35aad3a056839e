from studio_app import helpers as hp

import logging
import enum

log = logging.getLogger("studio_actions.enums")


class TimerMode(enum.IntEnum):
    """
    How a scheduler should repeat an action

    OFF
        The action is only sent when it is invoked

    AUTO_START
        The timer starts as soon as the connection is made

    START_ON_TRIGGER
        The timer starts the first time the action is invoked

    TOGGLE_ON_TRIGGER
        Each time the action is invoked the timer is started or stopped
    """

    OFF = 0
    AUTO_START = 1
    START_ON_TRIGGER = 2
    TOGGLE_ON_TRIGGER = 3

    @classmethod
    def from_value(kls, value):
        """
        Return the TimerMode for this stored integer.

        Integers that don't match a mode give us ``TimerMode.OFF``
        """
        try:
            return kls(value)
        except ValueError:
            log.warning(hp.lc("Unknown timer mode, using OFF", got=value))
            return kls.OFF
