"""words.py
Reading a word from a terminal and turning it into a sequence of terminal symbols.
"""
import nltk

tokenizer = nltk.RegexpTokenizer(r"\S+")


def read_word(stream):
    """
    Read characters from stream up to the first newline, carriage return or end of input.
    Nothing else is stripped, so leading or inner spaces stay part of the word.
    """
    chars = []
    while True:
        c = stream.read(1)
        if not c or c in "\r\n":
            break
        chars.append(c)
    return "".join(chars)


def split_word(text, tokens=False):
    if tokens:
        return tokenizer.tokenize(text)
    return list(text)
