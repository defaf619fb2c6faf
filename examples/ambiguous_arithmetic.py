from monadparse import choice, char, digit, many1, fmap, chainl1, chainr1, parse_all, run_parser

# 1. Helper Functions for the operators
def add(x, y): return x + y
def sub(x, y): return x - y

number = fmap(lambda ds: int("".join(ds)), many1(digit()))
op = choice(fmap(lambda _: add, char('+')), fmap(lambda _: sub, char('-')))

# 2. The same chain folded both ways
left = chainl1(number, op)
right = chainr1(number, op)

if __name__ == "__main__":
    source = "8-4-2"
    # Every prefix of the chain is a result, since nothing commits
    for value, rest in left.parse(source):
        print(f"{value!r:6} rest={rest!r}")
    print("left: ", parse_all(left, source))    # [2]
    print("right:", parse_all(right, source))   # [6]
    print(run_parser(left, "8-4-"))
