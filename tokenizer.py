import re

# Tudo que não é letra, dígito ou espaço. (\w inclui "_", que não conta como letra)
_PUNCTUATION_RE = re.compile(r'[^\w\s]|_')
# Tudo que não é letra ou dígito.
_NON_ALNUM_RE = re.compile(r'[\W_]+')


def tokenize(text: str) -> list:
    """
    Quebra o texto em tokens minúsculos e alfanuméricos.
    Pontuação vira espaço, então "you're" gera ["you", "re"].
    """
    text = text.lower()
    text = _PUNCTUATION_RE.sub(' ', text)
    return text.split()


def normalize_key(s: str) -> str:
    """ Chave contínua para percorrer a Trie: minúscula, só letras e dígitos. """
    return _NON_ALNUM_RE.sub('', s.lower())
