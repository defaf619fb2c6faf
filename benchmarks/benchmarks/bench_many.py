from monadparse.Char import char, word
from monadparse.Combinators import first, many
from monadparse.Prim import run_parser


class TimeMany:
    def setup(self):
        self.parser = many(char("a"))
        self.small = "a" * 100
        self.medium = "a" * 500
        self.large = "a" * 1000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeWord:
    def setup(self):
        self.text = "abcdefghij" * 5 + " rest"

    def time_word_all_prefixes(self):
        word.parse(self.text)

    def time_word_first(self):
        first(word).parse(self.text)
