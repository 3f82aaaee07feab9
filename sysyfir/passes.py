"""Optimisation passes and the manager that runs them in order."""

from abc import ABC, abstractmethod


class Pass(ABC):
    """A transformation or analysis over a module."""

    def __init__(self, module):
        self.module = module

    @property
    def name(self):
        return type(self).__name__

    @abstractmethod
    def execute(self):
        """Run the pass over the module."""


class PassManager:
    """Holds passes for one module and runs them in the order added."""

    def __init__(self, module):
        self.module = module
        self.passes = []

    def add_pass(self, pass_cls):
        """Create ``pass_cls`` for the module and queue it; return the instance."""
        instance = pass_cls(self.module)
        self.passes.append(instance)
        return instance

    def execute(self):
        for each in self.passes:
            each.execute()