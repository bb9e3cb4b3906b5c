from tokenizer import normalize_key


class TrieNode:
    """ Representa um nó na Árvore Trie. """
    def __init__(self):
        # Dicionário onde a chave é um único caractere
        self.children = {}
        self.is_terminal = False
        # IDs de todas as citações com algum token que passa por este nó
        self.quote_ids = set()


class Trie:
    """
    Árvore de prefixos (Trie) de caracteres.
    Cada nó do caminho de inserção acumula o ID da citação, então a busca
    por prefixo é O(tamanho do prefixo), sem percorrer a subárvore.
    """
    def __init__(self):
        self.root = TrieNode()

    def _find_node(self, key: str):
        """ Desce pela Trie seguindo a chave. Retorna o nó final ou None. """
        current_node = self.root
        for char in key:
            current_node = current_node.children.get(char)
            if current_node is None:
                return None
        return current_node

    def insert(self, word: str, quote_id: int):
        """ Insere uma palavra na Trie, marcando o ID em cada nó do caminho. """
        key = normalize_key(word)
        if not key:
            return  # A raiz nunca recebe IDs

        current_node = self.root
        for char in key:
            if char not in current_node.children:
                current_node.children[char] = TrieNode()
            current_node = current_node.children[char]
            current_node.quote_ids.add(quote_id)

        current_node.is_terminal = True

    def search(self, prefix: str) -> set:
        """
        Busca por prefixo.
        Retorna o conjunto de IDs das citações com algum token que começa com
        o prefixo, ou um conjunto vazio se o prefixo não existir.
        """
        key = normalize_key(prefix)
        if not key:
            return set()

        node = self._find_node(key)
        if node is None:
            return set()
        return set(node.quote_ids)

    def get_suggestions(self, prefix: str, max_count: int) -> list:
        """
        Lista até max_count palavras completas que começam com o prefixo.
        Busca em profundidade (pré-ordem), filhos em ordem lexicográfica.
        """
        key = normalize_key(prefix)
        if not key or max_count <= 0:
            return []

        node = self._find_node(key)
        if node is None:
            return []

        suggestions = []
        self._collect_words(node, key, suggestions, max_count)
        return suggestions

    def _collect_words(self, node: TrieNode, current_word: str, suggestions: list, max_count: int):
        """ Função auxiliar recursiva da coleta de sugestões. """
        if len(suggestions) >= max_count:
            return

        if node.is_terminal:
            suggestions.append(current_word)

        for char in sorted(node.children.keys()):
            if len(suggestions) >= max_count:
                break
            self._collect_words(node.children[char], current_word + char, suggestions, max_count)

    def __contains__(self, word: str) -> bool:
        """ Verifica se a palavra foi inserida como token completo. """
        key = normalize_key(word)
        if not key:
            return False
        node = self._find_node(key)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        """ Número de palavras distintas (nós terminais). Percorre a árvore toda. """
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                count += 1
            stack.extend(node.children.values())
        return count
