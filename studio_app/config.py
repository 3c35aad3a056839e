"""
Options for the ``studio-actions`` script.

These are read from an optional yaml file that looks like:

.. code-block:: yaml

    term_colors: dark
    output: escaped
    hex_separator: ":"
    indent: 4

Anything not specified takes the default from ``StudioOptions``.
"""
from studio_app.errors import BadConfiguration, BadSpecValue, BadYaml
from studio_app import helpers as hp

from delfick_project.norms import Meta, dictobj, sb
from ruamel.yaml import YAML
import ruamel.yaml
import logging
import os

log = logging.getLogger("studio_app.config")


class StudioOptions(dictobj.Spec):
    term_colors = dictobj.Field(
        sb.string_choice_spec(["light", "dark"]),
        default="light",
        help="The colour theme to use for the logging output",
    )

    output = dictobj.Field(
        sb.string_choice_spec(["hex", "escaped"]),
        default="hex",
        help="How to display the bytes an action transmits",
    )

    hex_separator = dictobj.Field(
        sb.string_spec, default=" ", help="String to put between each byte in hex output"
    )

    indent = dictobj.Field(sb.integer_spec, default=2, help="Indentation for json output")


def read_yaml(location):
    """Read in a yaml file and return as a python object"""
    with open(location, encoding="utf-8") as fle:
        try:
            return YAML(typ="safe").load(fle)
        except (ruamel.yaml.parser.ParserError, ruamel.yaml.scanner.ScannerError) as error:
            raise BadYaml(
                "Failed to read yaml",
                location=location,
                error_type=error.__class__.__name__,
                error="{0}{1}".format(error.problem, error.problem_mark),
            )


def make_options(options=None):
    """Normalise a dictionary of options into a ``StudioOptions``"""
    if options is None:
        options = {}

    if not isinstance(options, dict):
        raise BadConfiguration("Expected a dictionary of options", got=type(options).__name__)

    for option in options:
        if option not in StudioOptions.fields:
            log.warning(hp.lc("Unknown option in configuration", wanted=option))

    try:
        return StudioOptions.FieldSpec().normalise(Meta.empty(), options)
    except BadSpecValue as error:
        raise BadConfiguration("Options were invalid", error=error)


def read_options(location=None):
    """
    Return ``StudioOptions`` from the yaml file at location.

    If location is None or doesn't exist then we get the default options.
    """
    if location is None or not os.path.exists(location):
        if location is not None:
            log.info(hp.lc("No configuration found", location=location))
        return make_options()

    try:
        return make_options(read_yaml(location))
    except BadConfiguration as error:
        raise BadConfiguration("Failed to read configuration", location=location, error=error)
