import json
import re
from dataclasses import dataclass
from typing import Optional

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"

_HIGHLIGHT_RE = re.compile(re.escape(HIGHLIGHT_OPEN) + "|" + re.escape(HIGHLIGHT_CLOSE))


class CorpusError(ValueError):
    """ Falha ao carregar ou validar o arquivo de citações. """


@dataclass(frozen=True)
class Quote:
    """ Uma citação do corpus. O ID é único e definido pelo autor do corpus. """
    id: int
    text: str
    author: str
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Quote":
        missing = [field for field in ("id", "text", "author") if field not in data]
        if missing:
            raise ValueError(f"Campos obrigatórios ausentes: {', '.join(missing)}")

        # bool é subclasse de int, mas não é um ID válido
        quote_id = data["id"]
        if not isinstance(quote_id, int) or isinstance(quote_id, bool):
            raise ValueError(f"ID deve ser inteiro, recebido {quote_id!r}")
        for field in ("text", "author"):
            if not isinstance(data[field], str):
                raise ValueError(f"Campo '{field}' deve ser texto, recebido {data[field]!r}")
        category = data.get("category")
        if category is not None and not isinstance(category, str):
            raise ValueError(f"Campo 'category' deve ser texto, recebido {category!r}")

        return cls(
            id=quote_id,
            text=data["text"],
            author=data["author"],
            category=category,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'text': self.text,
            'author': self.author,
            'category': self.category,
        }


@dataclass(frozen=True)
class SearchResult:
    quote: Quote
    highlighted_text: str


def strip_highlight(text: str) -> str:
    """ Remove os marcadores de destaque, recuperando o texto original. """
    return _HIGHLIGHT_RE.sub("", text)


def load_quotes(path: str) -> list:
    """
    Lê o corpus (lista JSON de objetos) preservando a ordem.
    Levanta CorpusError se o arquivo não existir, estiver corrompido
    ou tiver IDs repetidos.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise CorpusError(f"Arquivo de citações '{path}' não encontrado.") from e
    except OSError as e:
        raise CorpusError(f"Não foi possível ler o arquivo de citações '{path}': {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CorpusError(f"Arquivo de citações '{path}' corrompido: {e}") from e

    if not isinstance(raw, list):
        raise CorpusError(f"Arquivo de citações '{path}' deve conter uma lista.")

    quotes = []
    seen_ids = set()
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise CorpusError(f"Entrada {position} não é um objeto.")
        try:
            quote = Quote.from_dict(item)
        except (TypeError, ValueError) as e:
            raise CorpusError(f"Entrada {position} inválida: {e}") from e

        if quote.id in seen_ids:
            raise CorpusError(f"ID de citação repetido: {quote.id}")
        seen_ids.add(quote.id)
        quotes.append(quote)

    return quotes
