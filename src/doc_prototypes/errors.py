"""
Exceptions raised by the template registry.
"""


class TemplateNotFoundError(LookupError):
    """No master template is registered under the requested name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template not found: {name}")
