"""Errors raised for rejected user input under the strict input policy."""


class InvalidInputError(ValueError):
    """Input from the UI or a signal payload could not be used."""


class InvalidHexColorError(InvalidInputError):
    """Text is not a #RRGGBB / RRGGBB hex color."""

    def __init__(self, text):
        super().__init__(f"Not a hex color: {text!r}")
        self.text = text


class MalformedPanPayloadError(InvalidInputError):
    """A pan signal arrived without a usable location."""

    def __init__(self, signal_name, payload):
        super().__init__(f"{signal_name} signal has no usable location: {payload!r}")
        self.signal_name = signal_name
        self.payload = payload
