"""Date, datetime and time controls as HTML5 inputs."""

import datetime
from typing import Any, Optional

from semantic_formgen.forms.input_types import InputType
from .text_inputs import TextFieldInput


class DateInput(TextFieldInput):
    input_type = InputType.DATE.value
    html_type = "date"

    def format_value(self, value: Any) -> Optional[str]:
        if isinstance(value, datetime.datetime):
            return value.date().isoformat()
        if isinstance(value, datetime.date):
            return value.isoformat()
        return super().format_value(value)


class DateTimeInput(TextFieldInput):
    input_type = InputType.DATETIME.value
    html_type = "datetime-local"

    def format_value(self, value: Any) -> Optional[str]:
        if isinstance(value, datetime.datetime):
            return value.strftime("%Y-%m-%dT%H:%M")
        if isinstance(value, datetime.date):
            return f"{value.isoformat()}T00:00"
        return super().format_value(value)


class TimeInput(TextFieldInput):
    input_type = InputType.TIME.value
    html_type = "time"

    def format_value(self, value: Any) -> Optional[str]:
        if isinstance(value, (datetime.time, datetime.datetime)):
            return value.strftime("%H:%M")
        return super().format_value(value)
