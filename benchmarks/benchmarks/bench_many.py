from parsoeur.Char import lexeme, spaces, unsigned_integer
from parsoeur.Prim import run_parser


class TimeMany:
    def setup(self):
        self.parser = lexeme("a").many0()
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeDelimited:
    def setup(self):
        self.parser = unsigned_integer().left(spaces()).delimited0(lexeme(",").left(spaces()))
        self.small = ", ".join(str(n) for n in range(200))
        self.medium = ",\n".join(str(n) for n in range(2000))

    def time_delimited_small(self):
        run_parser(self.parser, self.small)

    def time_delimited_medium(self):
        run_parser(self.parser, self.medium)
