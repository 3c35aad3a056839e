"""
Tasks for the ``studio-actions`` script.

Each task is a function that takes in ``(project, reference, options)`` and
prints its result. ``project`` is an ``ActionProject``, ``reference`` is what
was given after the task on the commandline and ``options`` is a
``StudioOptions``.
"""
from studio_protocol.codec import bytes_to_hex, escape_bytes
from studio_app.errors import ActionNotFound, BadTask

from delfick_project.norms import sb
import json

available_tasks = {}


class a_task:
    """
    A decorator for registering a name for a task. This registry is used by
    ``run_task`` to convert names into tasks.
    """

    def __init__(self, key):
        self.key = key

    def __call__(self, item):
        available_tasks[self.key] = item
        return item


def run_task(name, project, reference, options):
    if name not in available_tasks:
        raise BadTask("Unknown task", wanted=name, available=sorted(available_tasks))
    return available_tasks[name](project, reference, options)


def resolve_action(project, reference):
    if reference in (None, "", sb.NotSpecified):
        raise ActionNotFound("This task requires you specify an action")
    return project.find(reference)


@a_task("help")
def show_help(project, reference, options):
    """Show the available tasks"""
    for name in sorted(available_tasks):
        doc = (available_tasks[name].__doc__ or "").strip().split("\n")[0]
        print(f"{name}: {doc}")


@a_task("list_actions")
def list_actions(project, reference, options):
    """Show the actions in the project"""
    for action in project:
        timer = action.timer_mode.name
        if action.timer_mode.value:
            timer = f"{timer} every {action.timer_interval_ms}ms"
        print(f"{action.action_id}\t{action.title}\t{timer}")


@a_task("show_action")
def show_action(project, reference, options):
    """Show the stored form of an action"""
    action = resolve_action(project, reference)
    print(json.dumps(action.serialize(), sort_keys=True, indent=options.indent))


@a_task("tx_bytes")
def tx_bytes(project, reference, options):
    """Show the bytes an action sends to the device"""
    bts = resolve_action(project, reference).tx_bytes()
    if options.output == "escaped":
        print(escape_bytes(bts))
    else:
        print(bytes_to_hex(bts, separator=options.hex_separator))
