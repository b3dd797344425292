import colorama


class TermcolorUtils:
    """
    colorama wrappers for console output. Every helper resets the style after the value.
    """

    @staticmethod
    def colorize(value: str | int | float, style: str) -> str:
        return f"{style}{value}{colorama.Style.RESET_ALL}"

    @staticmethod
    def red(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.RED)

    @staticmethod
    def green(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.GREEN)

    @staticmethod
    def cyan(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.CYAN)

    @staticmethod
    def magenta(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.MAGENTA)

    @staticmethod
    def symbol(value: str) -> str:
        """Colour a board symbol: 'x' cyan, 'o' magenta, the empty marker dimmed."""
        styles = {"x": colorama.Fore.CYAN, "o": colorama.Fore.MAGENTA}
        return TermcolorUtils.colorize(value, styles.get(value, colorama.Style.DIM))
