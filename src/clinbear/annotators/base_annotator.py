from typing import TypeVar, Generic, Any

from eliot import start_action

# --- Generic Base Annotator ---

# Define TypeVars to allow the Annotator to be generic over input and output data types.
InputType = TypeVar('InputType')
OutputType = TypeVar('OutputType')


class Annotator(Generic[InputType, OutputType]):
    """
    A generic, self-contained annotator.

    Each annotator is a callable object; calling it runs `annotate` inside an
    eliot action named after the annotator.
    """
    def __init__(self, name: str):
        """
        Initializes the annotator with its name.

        Args:
            name: The unique name for this annotator, used as the eliot action type.
        """
        if not name:
            raise ValueError("Annotator name cannot be empty.")
        self._name = name

    @property
    def name(self) -> str:
        """Returns the unique name of the annotator."""
        return self._name

    def annotate(self, data: InputType, **kwargs: Any) -> OutputType:
        """
        The specific annotation logic for this annotator. Implementations may
        transform the input type to a different output type.

        Args:
            data: The input data to be annotated.
            **kwargs: Additional data or parameters required for annotation.

        Returns:
            The annotated data, possibly with a different type than the input.
        """
        raise NotImplementedError("Each annotator must implement the 'annotate' method.")

    def __call__(self, data: InputType, **kwargs: Any) -> OutputType:
        with start_action(action_type=self.name, data=str(data)):
            return self.annotate(data, **kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
