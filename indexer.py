from trie import Trie
from tokenizer import tokenize

# Tokens com 1 caractere (ex: o artigo "a") não são indexados
MIN_TOKEN_LENGTH = 2


class Indexer:
    """
    Orquestra a indexação:
    Lê o corpus já carregado, cria a Trie (índice) e o mapa de citações.
    """

    def __init__(self, quotes: list):
        self.quotes = quotes

        self.trie = Trie()
        self.quotes_map = {}
        self.total_quotes = 0
        self.total_tokens = 0
        self.is_indexed = False

    def _extract_tokens(self, quote) -> list:
        """ Tokens indexáveis do texto e do autor da citação. """
        tokens = tokenize(quote.text + " " + quote.author)
        return [token for token in tokens if len(token) >= MIN_TOKEN_LENGTH]

    def index_corpus(self):
        """ Constrói o índice. Só roda uma vez; chamadas seguintes não fazem nada. """
        if self.is_indexed:
            return

        for quote in self.quotes:
            # 1. Guarda a citação no mapa
            self.quotes_map[quote.id] = quote

            # 2. Insere cada token na Trie
            for token in self._extract_tokens(quote):
                self.trie.insert(token, quote.id)
                self.total_tokens += 1

        self.total_quotes = len(self.quotes_map)
        self.is_indexed = True
        print(f"Indexadas {self.total_quotes} citações ({self.total_tokens} tokens).")
