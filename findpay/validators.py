# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validators for `findpayment` input.

`FindPaymentValidator` runs the findpay parser on the text being typed and turns a
`ParseError` into a `ValidationError`, so a `PromptSession` shows the same message
the shell would print after submission.

Included Validators:
- FindPaymentValidator: Validates `INDEX [a/AMOUNT | d/DATE | r/REMARK]` input.
- find_payment_validator: Factory returning a FindPaymentValidator.
"""
from __future__ import annotations

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from findpay.command import COMMAND_WORD
from findpay.exceptions import ParseError
from findpay.parser.find_payment_parser import FindPaymentCommandParser


class FindPaymentValidator(Validator):
    """
    Validates findpayment arguments.

    Args:
        parser (FindPaymentCommandParser | None): Parser to run. A default one is
            created when omitted.
        strip_command_word (bool): Accept input that still starts with
            `findpayment`, as typed at a shell prompt.
    """

    def __init__(
        self,
        parser: FindPaymentCommandParser | None = None,
        strip_command_word: bool = True,
    ) -> None:
        self.parser = parser or FindPaymentCommandParser()
        self.strip_command_word = strip_command_word
        super().__init__()

    def _arguments(self, text: str) -> str:
        if self.strip_command_word:
            word, _, rest = text.lstrip().partition(" ")
            if word.lower() == COMMAND_WORD:
                return rest
        return text

    def validate(self, document: Document) -> None:
        try:
            self.parser.parse(self._arguments(document.text))
        except ParseError as error:
            raise ValidationError(
                message=error.message.replace("\n", " "),
                cursor_position=len(document.text),
            ) from error


def find_payment_validator(
    parser: FindPaymentCommandParser | None = None,
) -> Validator:
    """Validator for findpayment arguments."""
    return FindPaymentValidator(parser)
