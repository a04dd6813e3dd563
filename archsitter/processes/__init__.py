"""Architecture processes.

Each subpackage exposes ``SLUG``, ``TASKS``, its inputs model and a
``process(inputs, ctx)`` function. ``archsitter.processes.registry``
collects them into the process catalog.
"""
