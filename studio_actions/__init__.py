"""
This module contains the actions a user defines for talking to a device.

.. autoclass:: studio_actions.Action

.. autoclass:: studio_actions.ActionProject

.. autoclass:: studio_actions.TimerMode
"""
from studio_actions.project import ActionProject
from studio_actions.enums import TimerMode
from studio_actions.action import Action

__all__ = ["Action", "ActionProject", "TimerMode"]
