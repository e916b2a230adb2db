import logging
import sys

from argweave import ArgParser, UnknownArgumentError, ValueFormatError, ValueSlot
from argweave.utils import setup_logging

setup_logging(console_log_level=logging.WARNING, log_filename=None)

retries = ValueSlot(0)
numbers: list[int] = []

parser = ArgParser("argument-examples")
(
    parser.add_help("h", "help", "Showcase of Argweave argument forms.")
    .add_string_argument("s", "service", description="Service name")
    .add_string_argument("r", "region", description="Target region")
    .set_default("us-east-1")
    .add_int_argument("retries", description="How many retries")
    .set_default(3)
    .store_value(retries)
    .add_flag("v", "verbose", description="Verbose output")
    .add_flag("d", "dry-run", description="Do not deploy")
    .add_int_argument("numbers", description="Numbers to sum")
    .set_multi_value(2)
    .set_positional()
    .store_values(numbers)
)


def main() -> int:
    try:
        valid = parser.parse_argv(sys.argv)
    except (UnknownArgumentError, ValueFormatError) as error:
        print(f"error: {error}")
        return 2

    if parser.is_help_requested():
        parser.print_help()
        return 0
    if not valid:
        print(f"invalid: {parser.last_report.describe()}")
        return 1

    if parser.get_flag("verbose"):
        print(f"Deploying {parser.get_string('s')} to {parser.get_string('region')}")
    print(f"retries={retries.value} dry_run={parser.get_flag('d')} sum={sum(numbers)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
