
class ExperimentDefinitionError(Exception):
    """Raised when an experiment is committed without at least two alternatives."""
