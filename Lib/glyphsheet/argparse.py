from argparse import ArgumentParser


class GlyphsheetArgumentParser(ArgumentParser):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_argument(
            "--log-level",
            choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
            default="INFO",
        )
        self.add_argument(
            "--show-tracebacks",
            action="store_true",
            help=(
                "By default, errors will only print out a message. "
                "Tracebacks won't be included since the tool is intended for "
                "type designers and not developers."
            ),
        )
