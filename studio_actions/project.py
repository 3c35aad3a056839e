"""
The actions in a project file.

A project file is a json object with an ``actions`` list where each item is
the record from ``Action.serialize``. Everything else in the file belongs to
other parts of the project and is kept as is when we save it again.
"""
from studio_actions.action import Action

from studio_app.errors import ActionNotFound, BadProject
from studio_app import helpers as hp

import logging
import json
import os

log = logging.getLogger("studio_actions.project")


class ActionProject:
    """
    Holds the actions of one project in order

    Each action is given an ``action_id`` that no other action in this
    project has.
    """

    def __init__(self, actions=None, extra=None):
        self.actions = list(actions or [])
        self.extra = dict(extra or {})

    @classmethod
    def from_records(kls, records, extra=None):
        project = kls(extra=extra)
        project.read(records)
        return project

    @classmethod
    def load(kls, location):
        """Create a project from the json file at location"""
        if not os.path.exists(location):
            raise BadProject("Project file doesn't exist", location=location)

        with open(location, encoding="utf-8") as fle:
            try:
                data = json.load(fle)
            except (TypeError, ValueError) as error:
                raise BadProject("Failed to read json", location=location, error=error)

        if not isinstance(data, dict):
            raise BadProject("Expected a json object", location=location, got=type(data).__name__)

        records = data.pop("actions", [])
        if not isinstance(records, list):
            raise BadProject(
                "Expected actions to be a list", location=location, got=type(records).__name__
            )

        project = kls.from_records(records, extra=data)
        log.debug(hp.lc("Loaded project", location=location, actions=len(project)))
        return project

    def save(self, location, indent=4):
        """Write this project as json to location"""
        data = dict(self.extra)
        data["actions"] = self.serialize()

        with open(location, "w", encoding="utf-8") as fle:
            json.dump(data, fle, indent=indent)
            fle.write("\n")

    def serialize(self):
        return [action.serialize() for action in self.actions]

    def read(self, records):
        """
        Replace our actions with actions made from these records.

        Records that are empty are skipped.
        """
        self.actions = []

        for i, record in enumerate(records):
            action = Action(len(self.actions))
            if action.read(record):
                self.actions.append(action)
            else:
                log.warning(hp.lc("Skipping empty action record", index=i))

    @property
    def next_action_id(self):
        if not self.actions:
            return 0
        return max(action.action_id for action in self.actions) + 1

    def add_action(self):
        """Make a new action with default values and return it"""
        action = Action(self.next_action_id)
        self.actions.append(action)
        return action

    def get(self, action_id):
        for action in self.actions:
            if action.action_id == action_id:
                return action
        raise ActionNotFound(action_id=action_id)

    def find(self, reference):
        """
        Return the action referred to by reference.

        This may be an ``action_id`` as an integer or a string of digits, or
        the title of an action.
        """
        if isinstance(reference, int) or (isinstance(reference, str) and reference.isdigit()):
            return self.get(int(reference))

        wanted = hp.simplified(str(reference))
        for action in self.actions:
            if action.title == wanted:
                return action

        raise ActionNotFound(reference=reference, available=[a.title for a in self.actions])

    def remove_action(self, action_id):
        """Remove the action with this action_id and return it"""
        action = self.get(action_id)
        self.actions.remove(action)
        return action

    def duplicate_action(self, action_id):
        """Add a copy of the action with this action_id after it and return the copy"""
        original = self.get(action_id)

        duplicate = Action(self.next_action_id)
        duplicate.read(original.serialize())
        duplicate.title = f"{original.title} (Copy)"

        self.actions.insert(self.actions.index(original) + 1, duplicate)
        return duplicate

    def __iter__(self):
        return iter(self.actions)

    def __len__(self):
        return len(self.actions)
