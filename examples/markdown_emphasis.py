from monadparse import char, string, alpha_num, none_of, sequence, between, many1, first, fmap

# 1. Delimiter detectors: '_' followed by an alphanumeric opens italics,
# an alphanumeric followed by '_' closes them.
begin_italics = sequence(char("_"), alpha_num())
end_italics = sequence(alpha_num(), char("_"))

# 2. A whole emphasised span, e.g. "_is_" or "**markdown**"
def emphasis(delim: str):
    text = fmap("".join, many1(none_of(delim)))
    opener = string(delim)
    return first(between(opener, opener, text))

italics = emphasis("_")
bold = emphasis("**")

md_line = "_is_ a test of **markdown** parsing."

if __name__ == "__main__":
    print(begin_italics.parse(md_line))
    print(end_italics.parse("s_ a test"))
    print(italics.parse(md_line))
    print(bold.parse("**markdown** parsing."))
