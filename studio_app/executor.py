"""
This is where the mainline sits and is responsible for setting up the logging,
the argument parsing and for running the chosen task.
"""

from studio_actions.project import ActionProject
from studio_actions.tasks import run_task
from studio_app.config import read_options
from studio_app import VERSION

from delfick_project.app import App, OptionalFileType
from delfick_project.norms import sb
import sys
import os


class App(App):
    """
    The app is based on `delfick-project App <https://delfick-project.readthedocs.io/en/latest/api/app.html>`_
    and is responsible for several things:

    * Reading in environment variables
    * Reading in positional and keyword commandline arguments
    * Setting up logging
    * Reading in the options and the project file
    * Running the chosen task

    Environment variables we look at are:

    STUDIO_PROJECT
        The project file to read actions from

    STUDIO_CONFIG
        The yaml file to read options from
    """

    VERSION = VERSION
    cli_categories = ["studio_app"]
    cli_description = "Show the actions in a serial studio project"
    cli_environment_defaults = {
        "STUDIO_PROJECT": ("--project", "./project.json"),
        "STUDIO_CONFIG": ("--config", "./studio.yml"),
    }
    cli_positional_replacements = [("--task", "list_actions"), ("--reference", sb.NotSpecified)]

    silent_by_default_environ_name = "STUDIO_SILENT_BY_DEFAULT"

    def mainline(self, argv=None, print_errors_to=sys.stdout, **execute_args):
        original_argv = argv
        if argv is None:
            argv = sys.argv[1:]

        if len(argv) >= 1 and argv[0] == "help":
            os.environ[self.silent_by_default_environ_name] = "1"

        super(App, self).mainline(original_argv, print_errors_to, **execute_args)

    def execute(self, args_obj, args_dict, extra_args, logging_handler):
        config_name = None
        config = args_dict["studio_app"]["config"]
        if config not in (None, sb.NotSpecified):
            config_name = config.name
            config.close()

        options = read_options(config_name)
        self.setup_logging_theme(logging_handler, colors=options.term_colors)

        task = args_dict["studio_app"]["task"]
        project = ActionProject()
        if task != "help":
            project = ActionProject.load(args_dict["studio_app"]["project"])

        run_task(task, project, args_dict["studio_app"]["reference"], options)

    def specify_other_args(self, parser, defaults):
        parser.add_argument(
            "--task", help="The task to run", dest="studio_app_task", **defaults["--task"]
        )

        parser.add_argument(
            "--reference",
            help="The id or title of an action",
            dest="studio_app_reference",
            **defaults["--reference"]
        )

        parser.add_argument(
            "--project",
            help="Project file to read actions from",
            dest="studio_app_project",
            **defaults["--project"]
        )

        parser.add_argument(
            "--config",
            help="Config file to read options from",
            dest="studio_app_config",
            type=OptionalFileType("r"),
            **defaults["--config"]
        )

        return parser


main = App.main
