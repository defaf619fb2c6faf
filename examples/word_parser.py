from monadparse import word, letter, lower, bind, result, sequence, parse_all

# 1. The word rule yields every prefix of the leading letters
if __name__ == "__main__":
    for value, rest in word.parse("hello world"):
        print(f"{value!r:10} rest={rest!r}")

    # 2. Two lowercase letters in a row, joined
    double_lower = bind(lower(), lambda c1: bind(lower(), lambda c2: result(c1 + c2)))
    print(double_lower.parse("abcd"))

    # 3. Pairs of letters
    print(sequence(letter(), letter()).parse("xy"))

    # 4. Only complete parses
    print(parse_all(word, "hello"))
