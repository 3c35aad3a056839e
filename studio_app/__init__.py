VERSION = "0.1.0"

__shortdesc__ = """Base module for the serial studio actions tooling"""

__doc__ = """
Studio Actions
==============

Studio actions is a Python3 library for describing the commands a serial or
network device tool sends to a connected device.

Each action holds the text or hex payload to transmit, an optional end of line
sequence and the timer settings a scheduler uses to repeat it.

There are two main ways of using it:

Using the studio-actions script
    Once you have pip installed ``serial-studio-actions`` into your python
    environment, you will have a ``studio-actions`` script on your PATH that
    can list the actions in a project file and show the bytes they transmit.

As a library
    Create ``studio_actions.Action`` objects, or load them from a project file
    with ``studio_actions.ActionProject``, and hand ``action.tx_bytes()`` to
    your own transport.
"""
