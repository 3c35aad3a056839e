"""
Studio actions makes heavy use of
`delfick errors <https://delfick-project.readthedocs.io/en/latest/api/errors.html>`_

Base your error classes on ``StudioAppError``:

.. code-block:: python

    from studio_app.errors import StudioAppError

    class MyAmazingError(StudioAppError):
        desc = "Something terrible has happened"

    raise MyAmazingError("The world exploded", info_one=1, info_two=2)

The `app <https://delfick-project.readthedocs.io/en/latest/api/app.html>`_
integration will catch these errors and display them relatively nicely.
"""
from delfick_project.errors import DelfickError, ProgrammerError
from delfick_project.norms import BadSpecValue


class StudioAppError(DelfickError):
    pass


# Explicitly make these errors in this context
BadSpecValue = BadSpecValue
ProgrammerError = ProgrammerError


class BadConfiguration(StudioAppError):
    desc = "Bad configuration"


class BadYaml(StudioAppError):
    desc = "Invalid yaml file"


class BadProject(StudioAppError):
    desc = "Invalid project file"


class BadTask(StudioAppError):
    desc = "Bad task"


class ActionNotFound(StudioAppError):
    desc = "Couldn't find action"
