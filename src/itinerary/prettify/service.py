"""Line prettifier - airport code and timestamp substitution."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from itinerary.prettify.formatting import (
    format_date,
    format_time_12,
    format_time_24,
    parse_offset_datetime,
)
from itinerary.prettify.normalize import join_lines, normalize, split_lines
from itinerary.prettify.stats import TokenStats
from itinerary.reference.airports import Field, LookupTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeRule:
    """Airport code token resolved to a table field."""

    pattern: re.Pattern
    field: Field


@dataclass(frozen=True)
class DateTimeRule:
    """Timestamp token rendered by a formatter."""

    pattern: re.Pattern
    formatter: Callable[[datetime], str]


# Longer prefixes first so *##KJFK is never read as *#KJF + K
CODE_RULES: List[CodeRule] = [
    CodeRule(re.compile(r"\*##(\w{4})", re.ASCII), "city"),
    CodeRule(re.compile(r"\*#(\w{3})", re.ASCII), "city"),
    CodeRule(re.compile(r"##(\w{4})", re.ASCII), "name"),
    CodeRule(re.compile(r"#(\w{3})", re.ASCII), "name"),
]

DATETIME_RULES: List[DateTimeRule] = [
    DateTimeRule(re.compile(r"D\((.+?)\)"), format_date),
    DateTimeRule(re.compile(r"T12\((.+?)\)"), format_time_12),
    DateTimeRule(re.compile(r"T24\((.+?)\)"), format_time_24),
]


class LinePrettifier:
    """Rewrites itinerary text against a read-only airport lookup table."""

    def __init__(self, table: LookupTable):
        self._table = table

    def process(self, text: str, stats: Optional[TokenStats] = None) -> str:
        """Normalize the document and prettify every line."""
        lines = split_lines(normalize(text))
        if stats is not None:
            stats.total_lines += len(lines)
        return join_lines([self.process_line(line, stats) for line in lines])

    def process_line(self, line: str, stats: Optional[TokenStats] = None) -> str:
        """Apply code rules, then date/time rules, each as one pass over the line."""
        # Spans of tokens left verbatim; shorter rules rescanning them are not counted again
        unresolved: List[Tuple[int, int]] = []
        for rule in CODE_RULES:
            line, unresolved = self._substitute_codes(rule, line, unresolved, stats)
        for rule in DATETIME_RULES:
            line = rule.pattern.sub(self._datetime_replacer(rule, stats), line)
        return line

    def _substitute_codes(
        self,
        rule: CodeRule,
        line: str,
        unresolved: List[Tuple[int, int]],
        stats: Optional[TokenStats],
    ) -> Tuple[str, List[Tuple[int, int]]]:
        """One left-to-right pass of a code rule. Returns the new line and its unresolved spans."""
        out: List[str] = []
        out_len = 0
        last = 0
        # (start, end, length change) of each replaced match, in old-line positions
        changes: List[Tuple[int, int, int]] = []
        new_unresolved: List[Tuple[int, int]] = []

        for m in rule.pattern.finditer(line):
            start, end = m.span()
            code = m.group(1)
            value = self._table.lookup(code, rule.field)
            seen = any(s < end and start < e for s, e in unresolved)
            if stats is not None and not seen:
                stats.record_code(code, value is not None)

            out.append(line[last:start])
            out_len += start - last
            if value is None:
                logger.debug("Unresolved airport code %r", m.group(0))
                out.append(m.group(0))
                new_unresolved.append((out_len, out_len + end - start))
                out_len += end - start
            else:
                out.append(value)
                out_len += len(value)
                changes.append((start, end, len(value) - (end - start)))
            last = end
        out.append(line[last:])

        for s, e in unresolved:
            if any(cs < e and s < ce for cs, ce, _ in changes):
                continue
            shift = sum(d for _, ce, d in changes if ce <= s)
            new_unresolved.append((s + shift, e + shift))

        return "".join(out), new_unresolved

    def _datetime_replacer(self, rule: DateTimeRule, stats: Optional[TokenStats]):
        def replace(m: re.Match) -> str:
            raw = m.group(1)
            dt = parse_offset_datetime(raw)
            if stats is not None:
                stats.record_datetime(raw, dt is not None)
            if dt is None:
                # Wrapper is dropped, raw content kept
                logger.debug("Unparsable timestamp %r", raw)
                return raw
            return rule.formatter(dt)

        return replace


def process_line(line: str, table: LookupTable) -> str:
    """Prettify a single line."""
    return LinePrettifier(table).process_line(line)


def prettify(text: str, table: LookupTable) -> str:
    """Prettify a whole document."""
    return LinePrettifier(table).process(text)
