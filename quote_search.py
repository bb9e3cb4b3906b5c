import random
import re

from corpus import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN, SearchResult
from indexer import Indexer
from tokenizer import normalize_key

MAX_SUGGESTIONS = 5

# Separa palavras e espaços, mantendo os espaços na lista
_WORD_SPLIT_RE = re.compile(r'(\s+)')


class QuoteSearch:
    """
    Busca por prefixo sobre as citações, com destaque e sugestões.
    O índice é construído uma vez no __init__ e não muda depois disso.
    """
    def __init__(self, quotes: list, rng=None):
        self._quotes = list(quotes)
        # Qualquer objeto com randrange(n); testes passam um random.Random com semente
        self._rng = rng if rng is not None else random.Random()

        indexer = Indexer(self._quotes)
        indexer.index_corpus()
        self.trie = indexer.trie
        self.quotes_map = indexer.quotes_map

    # ====================================================================
    # BUSCA
    # ====================================================================

    def search(self, query: str) -> list:
        """
        Executa a busca por prefixo.
        Consulta vazia devolve o corpus inteiro, sem destaque, na ordem original.
        Os demais resultados saem em ordem crescente de ID.
        """
        if not query.strip():
            return [SearchResult(quote, quote.text) for quote in self._quotes]

        results = []
        for quote_id in sorted(self.trie.search(query)):
            quote = self.quotes_map.get(quote_id)
            if quote is None:
                print(f"AVISO: ID {quote_id} está na Trie mas não no mapa de citações.")
                continue
            results.append(SearchResult(quote, self.highlight(quote.text, query)))
        return results

    def highlight(self, text: str, query: str) -> str:
        """
        Envolve com <mark> cada palavra do texto que começa com a consulta.
        A comparação é normalizada; a palavra marcada mantém a grafia original.
        O corpus não pode conter "<mark>" ou "</mark>" literais, senão
        strip_highlight não recupera o texto original.
        """
        search_key = normalize_key(query)
        if not search_key:
            return text

        parts = _WORD_SPLIT_RE.split(text)
        for i, part in enumerate(parts):
            word_key = normalize_key(part)
            if word_key and word_key.startswith(search_key):
                parts[i] = f"{HIGHLIGHT_OPEN}{part}{HIGHLIGHT_CLOSE}"
        return "".join(parts)

    def get_suggestions(self, prefix: str) -> list:
        return self.trie.get_suggestions(prefix, MAX_SUGGESTIONS)

    # ====================================================================
    # ACESSO AO CORPUS
    # ====================================================================

    def random_quote(self):
        """ Sorteia uma citação do corpus (uniforme, independente a cada chamada). """
        if not self._quotes:
            raise ValueError("Corpus vazio: não há citação para sortear.")
        return self._quotes[self._rng.randrange(len(self._quotes))]

    def all_quotes(self) -> list:
        return list(self._quotes)

    def get_quote(self, quote_id: int):
        return self.quotes_map.get(quote_id)
