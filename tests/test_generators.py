import pytest

from keywarden.analyzers.charsets import AMBIGUOUS, LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE
from keywarden.core.errors import ConfigError
from keywarden.core.models import GenerationConfig
from keywarden.generators.passphrase import WORD_LIST, PassphraseGenerator
from keywarden.generators.password import PasswordGenerator
from keywarden.generators.random_source import (
    SecureRandomSource,
    SeededRandomSource,
    default_random_source,
)

ALL_CHARS = set(LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS)


@pytest.fixture
def generator(rng):
    return PasswordGenerator(rng)


class TestPasswordGenerator:
    @pytest.mark.parametrize("length", [4, 5, 12, 16, 64])
    def test_length_without_variety(self, generator, length):
        config = GenerationConfig(length=length, ensure_variety=False)
        for _ in range(20):
            assert len(generator.generate(config)) == length

    @pytest.mark.parametrize("length", [4, 16, 33])
    def test_length_with_variety(self, generator, length):
        config = GenerationConfig(length=length)
        for _ in range(20):
            assert len(generator.generate(config)) == max(length, 4)

    def test_variety_covers_every_enabled_class(self, generator):
        config = GenerationConfig(length=4)
        for _ in range(50):
            pw = generator.generate(config)
            assert set(pw) & set(LOWERCASE)
            assert set(pw) & set(UPPERCASE)
            assert set(pw) & set(NUMBERS)
            assert set(pw) & set(SYMBOLS)

    def test_only_charset_characters(self, generator):
        for _ in range(50):
            assert set(generator.generate()) <= ALL_CHARS

    def test_no_symbols(self, generator):
        config = GenerationConfig(length=20, include_symbols=False)
        for _ in range(50):
            pw = generator.generate(config)
            assert len(pw) == 20
            assert not set(pw) & set(SYMBOLS)

    def test_exclude_ambiguous(self, generator):
        config = GenerationConfig(length=40, exclude_ambiguous=True)
        for _ in range(50):
            assert not set(generator.generate(config)) & set(AMBIGUOUS)

    def test_single_class(self, generator):
        config = GenerationConfig(
            length=10,
            include_lowercase=False,
            include_uppercase=False,
            include_symbols=False,
        )
        assert set(generator.generate(config)) <= set(NUMBERS)

    def test_exclude_similar_has_no_effect(self):
        a = PasswordGenerator(SeededRandomSource(3)).generate(GenerationConfig(exclude_similar=True))
        b = PasswordGenerator(SeededRandomSource(3)).generate(GenerationConfig(exclude_similar=False))
        assert a == b

    def test_seeded_generation_is_reproducible(self):
        a = PasswordGenerator(SeededRandomSource(42)).generate()
        b = PasswordGenerator(SeededRandomSource(42)).generate()
        assert a == b

    def test_too_short(self, generator):
        with pytest.raises(ConfigError, match="at least 4 characters"):
            generator.generate(GenerationConfig(length=3))

    def test_no_classes(self, generator):
        config = GenerationConfig(
            include_lowercase=False,
            include_uppercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(ConfigError, match="No valid characters"):
            generator.generate(config)


class TestPassphraseGenerator:
    def test_default_shape(self, rng):
        phrase = PassphraseGenerator(rng).generate(4, "-")
        tokens = phrase.split("-")
        assert len(tokens) == 5
        assert all(word in WORD_LIST for word in tokens[:4])
        assert 0 <= int(tokens[4]) < 1000

    def test_custom_separator(self, rng):
        tokens = PassphraseGenerator(rng).generate(6, " ").split(" ")
        assert len(tokens) == 7

    def test_custom_word_list(self, rng):
        phrase = PassphraseGenerator(rng, words=["alpha"]).generate(3, ".")
        assert phrase.startswith("alpha.alpha.alpha.")

    def test_zero_words(self, rng):
        with pytest.raises(ConfigError):
            PassphraseGenerator(rng).generate(0)


class TestRandomSource:
    def test_default_is_secure(self):
        assert isinstance(default_random_source(), SecureRandomSource)
        assert isinstance(default_random_source(seed=1), SeededRandomSource)
        assert isinstance(default_random_source(secure=False), SeededRandomSource)

    @pytest.mark.parametrize("source", [SecureRandomSource(), SeededRandomSource(0)])
    def test_shuffle_is_a_permutation(self, source):
        items = list(range(30))
        source.shuffle(items)
        assert sorted(items) == list(range(30))

    def test_choice_of_empty_sequence(self, rng):
        with pytest.raises(IndexError):
            rng.choice("")

    def test_randrange_bounds(self, rng):
        values = [rng.randrange(100, 110) for _ in range(200)]
        assert min(values) >= 100 and max(values) < 110
