"""Process runtime: task definitions, execution contexts and errors.

Import from the submodules directly (``archsitter.runtime.task``,
``archsitter.runtime.context`` ...).
"""
