"""
Lorem ipsum filler text

Expands ``\\lipsum`` directives the way the LaTeX lipsum package is
commonly used in drafts:

    \\lipsum        -> 3 paragraphs
    \\lipsum[n]     -> n paragraphs
    \\lipsum[n-m]   -> m - n + 1 paragraphs (inclusive range)

Paragraph counts are clamped to [1, 150]. Generation is seeded per call,
so expanding the same text twice gives the same paragraphs.
"""

import random
import logging
from typing import List, Optional

from config.constants import (
    LIPSUM_DEFAULT_PARAGRAPHS,
    LIPSUM_MAX_PARAGRAPHS,
    LIPSUM_MIN_WORDS,
    LIPSUM_MAX_WORDS,
    LIPSUM_SEED,
)
from texpages.latex.directives import LIPSUM

logger = logging.getLogger(__name__)

LOREM_IPSUM_WORDS = [
    'lorem', 'ipsum', 'dolor', 'sit', 'amet', 'consectetur', 'adipiscing', 'elit',
    'sed', 'do', 'eiusmod', 'tempor', 'incididunt', 'ut', 'labore', 'et', 'dolore',
    'magna', 'aliqua', 'enim', 'ad', 'minim', 'veniam', 'quis', 'nostrud',
    'exercitation', 'ullamco', 'laboris', 'nisi', 'aliquip', 'ex', 'ea', 'commodo',
    'consequat', 'duis', 'aute', 'irure', 'reprehenderit', 'in', 'voluptate',
    'velit', 'esse', 'cillum', 'fugiat', 'nulla', 'pariatur', 'excepteur', 'sint',
    'occaecat', 'cupidatat', 'non', 'proident', 'sunt', 'culpa', 'qui', 'officia',
    'deserunt', 'mollit', 'anim', 'id', 'est', 'laborum', 'at', 'vero', 'eos',
    'accusamus', 'iusto', 'odio', 'dignissimos', 'ducimus', 'blanditiis',
    'praesentium', 'voluptatum', 'deleniti', 'atque', 'corrupti', 'quos', 'dolores',
    'quas', 'molestias', 'excepturi', 'occaecati', 'cupiditate', 'facilis',
    'expedita', 'distinctio', 'nam', 'libero', 'tempore', 'cum', 'soluta', 'nobis',
    'eligendi', 'optio', 'cumque', 'nihil', 'impedit', 'quo', 'minus', 'maxime',
    'placeat', 'facere', 'possimus', 'omnis', 'assumenda', 'repellendus',
    'temporibus', 'autem', 'quibusdam', 'officiis', 'debitis', 'rerum',
    'necessitatibus', 'saepe', 'eveniet', 'voluptates', 'repudiandae', 'recusandae',
    'itaque', 'earum', 'hic', 'tenetur', 'sapiente', 'delectus', 'reiciendis',
    'voluptatibus', 'maiores', 'alias', 'perferendis', 'doloribus', 'asperiores',
    'repellat', 'neque', 'porro', 'quisquam', 'totam', 'rem', 'aperiam', 'eaque',
    'ipsa', 'quae', 'ab', 'illo', 'inventore', 'veritatis', 'quasi', 'architecto',
    'beatae', 'vitae', 'dicta', 'explicabo', 'nemo', 'ipsam', 'quia', 'voluptas',
    'aspernatur', 'odit', 'aut', 'fugit', 'consequuntur', 'magni', 'ratione',
    'sequi', 'nesciunt'
]

CANONICAL_OPENING = ('Lorem', 'ipsum')

# Words a later paragraph may not open with, so only the first reads "Lorem ipsum"
_NON_OPENING_WORDS = [word for word in LOREM_IPSUM_WORDS if word != 'lorem']


class LipsumGenerator:
    """
    Seeded lorem ipsum generator.

    Example:
        >>> gen = LipsumGenerator(seed=7)
        >>> paras = gen.paragraphs(3)
        >>> paras[0].startswith('Lorem ipsum')
        True
    """

    def __init__(
        self,
        seed: int = LIPSUM_SEED,
        min_words: int = LIPSUM_MIN_WORDS,
        max_words: int = LIPSUM_MAX_WORDS,
        max_paragraphs: int = LIPSUM_MAX_PARAGRAPHS,
    ):
        self._rng = random.Random(seed)
        self.min_words = min_words
        self.max_words = max(min_words, max_words)
        self.max_paragraphs = max_paragraphs

    def words(self, count: int, start_with_lorem: bool = True) -> str:
        """One sentence of ``count`` words, capitalized and ending in a period."""
        if count <= 0:
            return ''

        result: List[str] = []
        if start_with_lorem and count >= 2:
            result.extend(CANONICAL_OPENING)
            count -= 2
        elif not start_with_lorem:
            result.append(self._rng.choice(_NON_OPENING_WORDS))
            count -= 1

        result.extend(self._rng.choice(LOREM_IPSUM_WORDS) for _ in range(count))

        result[0] = result[0][:1].upper() + result[0][1:]
        return ' '.join(result) + '.'

    def paragraphs(self, count: int) -> List[str]:
        """``count`` paragraphs; only the first opens with "Lorem ipsum"."""
        result = []
        for i in range(count):
            word_count = self._rng.randint(self.min_words, self.max_words)
            result.append(self.words(word_count, start_with_lorem=(i == 0)))
        return result

    def latex_lipsum(self, count: int = LIPSUM_DEFAULT_PARAGRAPHS) -> str:
        """Paragraphs separated by blank lines, count clamped to [1, max]."""
        count = min(max(count, 1), self.max_paragraphs)
        return '\n\n'.join(self.paragraphs(count))


def lipsum_paragraph_count(start: Optional[str], end: Optional[str]) -> int:
    """Paragraph count requested by the optional ``[n]`` / ``[n-m]`` argument."""
    if start is None:
        return LIPSUM_DEFAULT_PARAGRAPHS
    if end is None:
        return int(start)
    return int(end) - int(start) + 1


def expand_lipsum(text: str, settings=None) -> str:
    """
    Replace every ``\\lipsum`` directive in text with generated paragraphs.

    Args:
        text: Source text
        settings: Optional config.settings.Settings for seed and word ranges

    Returns:
        Text with filler paragraphs in place of the directives
    """
    if not text or not LIPSUM.matches(text):
        return text

    if settings is not None:
        generator = LipsumGenerator(
            seed=settings.lipsum_seed,
            min_words=settings.lipsum_min_words,
            max_words=settings.lipsum_max_words,
            max_paragraphs=settings.lipsum_max_paragraphs,
        )
    else:
        generator = LipsumGenerator()

    parts: List[str] = []
    last = 0
    for match in LIPSUM.finditer(text):
        start, end = match.groups
        count = lipsum_paragraph_count(start, end)
        parts.append(text[last:match.start])
        parts.append(generator.latex_lipsum(count))
        last = match.end
        logger.debug(f"Expanded \\lipsum into {min(max(count, 1), generator.max_paragraphs)} paragraphs")
    parts.append(text[last:])
    return ''.join(parts)
