"""Client library for the TeamCity REST API: projects, build types, parameters, dependencies, agent pools and groups."""

__version__ = "0.1.0"