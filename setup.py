from studio_app import VERSION

from setuptools import setup, find_packages
import os

packages = []

readme_location = os.path.join(os.path.dirname(__file__), "README.rst")

# __file__ can sometimes be "" instead of what we want
# in that case we assume we're already in this directory
this_dir = os.path.dirname(__file__) or "."

for filename in os.listdir(this_dir):
    if filename.startswith("studio_") and os.path.isdir(os.path.join(this_dir, filename)):
        packages.extend(
            [filename] + ["{0}.{1}".format(filename, pkg) for pkg in find_packages(filename)]
        )

# fmt: off

setup(
      name = "serial-studio-actions"
    , version = VERSION
    , packages = packages
    , include_package_data = True

    , python_requires = ">= 3.7"

    , install_requires =
      [ "delfick_project>=0.7.9"
      , "ruamel.yaml>=0.16.12"
      , "rainbow_logging_handler==2.2.2"
      ]

    , extras_require =
      { "tests":
        [ "pytest>=6.1.2"
        ]
      }

    , entry_points =
      { 'console_scripts' :
        [ 'studio-actions = studio_app.executor:main'
        ]
      }

    # metadata for upload to PyPI
    , description = "The actions a serial studio project sends to a device"
    , long_description = open(readme_location).read()
    , license = "MIT"
    , keywords = "serial studio actions"
    )

# fmt: on
