"""Name, date and title formatting for the citation engine."""

import re

from bibcite.core.fields import DateParts, Name

# Kana, CJK ideographs and Hangul syllables
CJK_RANGES = (
    ("\u3040", "\u30ff"),
    ("\u3400", "\u4dbf"),
    ("\u4e00", "\u9fff"),
    ("\uac00", "\ud7af"),
)


def _is_cjk(text: str) -> bool:
    return any(lo <= char <= hi for char in text for lo, hi in CJK_RANGES)


class AuthorFormatter:
    """Formats names according to style rules."""

    def format(
        self,
        name: Name,
        sort_order: bool = False,
        initialize: bool = True,
        initialize_with: str = ".",
        sort_separator: str = ", ",
    ) -> str:
        """Format a single name.

        Args:
            name: Parsed name
            sort_order: Put the family name first ("Smith, J.")
            initialize: Reduce given names to initials
            initialize_with: Text after each initial; empty joins initials ("JD")
            sort_separator: Separator between family and given name in sort order

        Returns:
            Formatted name
        """
        last = self._clean(name.last)
        if name.is_literal:
            return last

        given = self._clean(name.given)
        if initialize and given:
            given = self._get_initials(given, initialize_with)

        if not given:
            formatted = last
        elif sort_order:
            formatted = f"{last}{sort_separator}{given}"
        else:
            formatted = f"{given} {last}"

        return f"{formatted}, {name.suffix}" if name.suffix else formatted

    def format_multiple(
        self,
        names: list[Name],
        sort_order: str = "",
        and_sep: str = "&",
        delimiter: str = ", ",
        delimiter_precedes_last: bool = True,
        et_al: str = "et al.",
        et_al_min: int = 0,
        et_al_use_first: int = 1,
        **options,
    ) -> str:
        """Format a list of names.

        Args:
            names: Parsed names
            sort_order: "first" inverts the first name, "all" inverts every name
            and_sep: Word or symbol before the last name; empty for none
            delimiter: Separator between names
            delimiter_precedes_last: Keep the delimiter before ``and_sep``
            et_al: Term appended when the list is truncated
            et_al_min: Truncate lists with at least this many names (0 disables)
            et_al_use_first: Number of names kept when truncating
            **options: Passed to :meth:`format`

        Returns:
            Formatted name list
        """
        if not names:
            return ""

        truncated = bool(et_al_min) and len(names) >= et_al_min
        shown = names[:et_al_use_first] if truncated else names
        formatted = [
            self.format(
                name,
                sort_order=sort_order == "all" or (sort_order == "first" and i == 0),
                **options,
            )
            for i, name in enumerate(shown)
        ]

        if truncated:
            return f"{delimiter.join(formatted)}{delimiter}{et_al}"
        if len(formatted) == 1:
            return formatted[0]
        if not and_sep:
            return delimiter.join(formatted)

        head = delimiter.join(formatted[:-1])
        # "A and B" unless the first name is inverted
        if len(formatted) == 2 and sort_order not in ("first", "all"):
            return f"{head} {and_sep} {formatted[-1]}"
        if delimiter_precedes_last:
            return f"{head}{delimiter}{and_sep} {formatted[-1]}"
        return f"{head} {and_sep} {formatted[-1]}"

    def _clean(self, text: str) -> str:
        """Drop case-protecting braces."""
        return text.replace("{", "").replace("}", "")

    def _get_initials(self, name: str, initialize_with: str = ".") -> str:
        """Reduce given names to initials, keeping hyphens between them."""
        if _is_cjk(name):
            return name

        words = []
        for word in name.split():
            parts = [part for part in word.split("-") if part]
            if initialize_with:
                initials = [f"{p[0].upper()}{initialize_with}" for p in parts]
                words.append("-".join(initials))
            else:
                words.append("".join(p[0].upper() for p in parts))

        return (" " if initialize_with else "").join(words)


def format_ordinal(number: int | str) -> str:
    """Format number as ordinal (1st, 2nd, 3rd, etc.)."""
    try:
        n = int(str(number))
    except (ValueError, TypeError):
        return str(number)

    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


class DateFormatter:
    """Formats dates with locale month names."""

    def __init__(self, months: list[str], no_date: str = "n.d."):
        self.months = months
        self.no_date = no_date

    def format_month(self, month: int | None) -> str:
        if not month or not 1 <= month <= len(self.months):
            return ""
        return self.months[month - 1]

    def format_date(self, date: DateParts, form: str = "year") -> str:
        """Format a date.

        Args:
            date: Parsed date
            form: "year", "year-month" or "full"

        Returns:
            Formatted date, the no-date term if the date is empty
        """
        # CSL years skip zero: -1 is 1 BC and 1 is AD 1
        if not date.year:
            return date.literal or self.no_date

        year = str(date.year) if date.year > 0 else f"{-date.year} BC"
        month = self.format_month(date.month)
        if not month or form == "year":
            return year

        if form == "year-month":
            return f"{year}, {month}"
        if form == "full" and date.day:
            return f"{month} {date.day}, {year}"
        if form == "full":
            return f"{month} {year}"
        return year


class TitleFormatter:
    """Applies text case to titles."""

    # Kept as written in sentence and title case
    ACRONYMS = frozenset(
        "NASA IEEE ACM MIT IBM XML HTML CSS API SQL JSON URL URI DOI DNA RNA ATP"
        " GDP USA UK EU WHO UN NATO UNESCO UNICEF".split()
    )

    # Lowercased inside title case
    LOWERCASE_WORDS = frozenset(
        "a an and as at but by for from in nor of on or so the to up with yet".split()
    )

    LATEX_COMMAND_WITH_ARGUMENT = re.compile(r"\\[a-zA-Z]+\{([^}]*)\}")
    LATEX_COMMAND = re.compile(r"\\[a-zA-Z]+")

    def format(self, title: str, case: str = "preserve") -> str:
        """Format title according to style rules."""
        if not title:
            return ""
        text = self.LATEX_COMMAND_WITH_ARGUMENT.sub(r"\1", title)
        text = self.LATEX_COMMAND.sub("", text)
        return self._apply_case(text, case)

    def _apply_case(self, title: str, case: str) -> str:
        """Apply case transformation.

        Words wrapped in braces are protected and keep their case.
        """
        words = title.split()
        last = len(words) - 1

        if case in ("sentence", "title"):
            title = " ".join(
                self._case_word(word, i, last, case) for i, word in enumerate(words)
            )
        elif case == "uppercase":
            title = title.upper()
        elif case == "lowercase":
            title = title.lower()

        return title.replace("{", "").replace("}", "")

    def _case_word(self, word: str, index: int, last: int, case: str) -> str:
        if word.startswith("{") or word.upper() in self.ACRONYMS:
            return word
        if case == "sentence":
            return word[:1].upper() + word[1:].lower() if index == 0 else word.lower()
        if 0 < index < last and word.lower() in self.LOWERCASE_WORDS:
            return word.lower()
        return word.capitalize()
