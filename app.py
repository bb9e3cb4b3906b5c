import os
from flask import Flask, abort, jsonify, render_template, request
from corpus import CorpusError, load_quotes
from quote_search import QuoteSearch

# --- CONFIGURAÇÃO ---
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
QUOTES_FILE = os.environ.get("QUOTES_FILE", os.path.join(BASE_DIR, "quotes.json"))
RESULTS_PER_PAGE = 10

app = Flask(__name__)

# --- CARREGAMENTO DOS DADOS ---
print("Carregando as citações...")
is_ready = False
try:
    quotes = load_quotes(QUOTES_FILE)
    is_ready = True
    print(f"{len(quotes)} citações carregadas de {QUOTES_FILE}.")
except CorpusError as e:
    quotes = []
    print(f"ERRO: {e}")

quote_search = QuoteSearch(quotes)


# --- FUNÇÕES AUXILIARES ---
def get_pagination_range(current_page, total_pages, window=2):
    """Cria a lista de páginas (ex: [1, '...', 4, 5, 6, '...', 10])."""
    if total_pages <= (2 * window + 5):
        return list(range(1, total_pages + 1))

    pages = []
    if current_page > window + 2:
        pages.extend([1, '...'])

    start = max(1, current_page - window)
    end = min(total_pages, current_page + window)
    for i in range(start, end + 1):
        if i not in pages:
            pages.append(i)

    if current_page < total_pages - window - 1:
        pages.extend(['...', total_pages])
    elif total_pages not in pages:
        pages.append(total_pages)
    return pages


def _result_to_dict(result):
    data = result.quote.to_dict()
    data['highlighted_text'] = result.highlighted_text
    return data


def _get_page():
    page = request.args.get('page', 1, type=int)
    return page if page and page > 0 else 1


# --- ROTAS DA APLICAÇÃO WEB ---
@app.route('/')
def index():
    """Página inicial, com uma citação sorteada."""
    random_quote = quote_search.random_quote() if is_ready and quotes else None
    return render_template('index.html', quote=random_quote)


@app.route('/search')
def search():
    """Página de resultados da busca."""
    query = request.args.get('query', '')
    page = _get_page()

    all_results = quote_search.search(query)
    total_results = len(all_results)
    total_pages = (total_results + RESULTS_PER_PAGE - 1) // RESULTS_PER_PAGE

    start_index = (page - 1) * RESULTS_PER_PAGE
    end_index = start_index + RESULTS_PER_PAGE
    results_for_page = all_results[start_index:end_index]

    pagination_range = get_pagination_range(page, total_pages) if total_pages > 1 else []

    return render_template(
        'results.html',
        query=query,
        results=results_for_page,
        suggestions=quote_search.get_suggestions(query),
        page=page,
        total_pages=total_pages,
        total_results=total_results,
        pagination_range=pagination_range
    )


@app.route('/quote/<int:quote_id>')
def show_quote(quote_id):
    """Exibe uma citação pelo ID."""
    quote = quote_search.get_quote(quote_id)
    if quote is None:
        abort(404)
    return render_template('quote.html', quote=quote)


# --- API JSON ---
@app.route('/api/search')
def api_search():
    query = request.args.get('query', '')
    results = quote_search.search(query)
    return jsonify([_result_to_dict(r) for r in results])


@app.route('/api/suggestions')
def api_suggestions():
    prefix = request.args.get('prefix', '')
    return jsonify({'prefix': prefix, 'suggestions': quote_search.get_suggestions(prefix)})


@app.route('/api/random')
def api_random():
    if not quotes:
        return jsonify({'error': 'Nenhuma citação carregada.'}), 503
    return jsonify(quote_search.random_quote().to_dict())


# --- EXECUÇÃO ---

if __name__ == '__main__':
    app.run(debug=True)
