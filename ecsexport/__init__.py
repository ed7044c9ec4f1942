"""
ecsexport - Export ECS service and task definition configs as YAML files.

Every service in a cluster is written to its own directory together with
the task definition it currently runs, with server-assigned fields removed
so repeated exports can be diffed.
"""

__version__ = "0.1.0"
