# bootstrap/__init__.py
# -*- coding: utf-8 -*-
"""
Bootstrap package: prepares a checkout (isolated environment, dependencies,
config file, tooling) and hands off to the downstream application.

The sequencer lives in ``bootstrap.orchestrator``; ``bootstrap.cli.main`` is
the console entry point.
"""
