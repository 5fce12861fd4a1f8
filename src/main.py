import sys
from typing import List, Optional

from src.core.simulation.insertion_player import InsertionPlayer
from src.ui.tree_plot import TreePlot

def main(keys: Optional[List[int]] = None, output: str = TreePlot.PATH_OUTPUT, plot: bool = True) -> InsertionPlayer:
    """
    Insere a sequência de chaves passo a passo, mostra os percursos e a
    estrutura final e salva o desenho da árvore.
    """
    print("=" * 60)
    print("AVL TREE - INSERÇÃO PASSO A PASSO")
    print("=" * 60)

    player = InsertionPlayer(keys=keys)
    player.run()

    state = player.snapshot()
    print("\nPreorder : " + " ".join(str(k) for k in state['preorder']))
    print("Inorder  : " + " ".join(str(k) for k in state['inorder']))
    print("Postorder: " + " ".join(str(k) for k in state['postorder']))
    print("\nEstrutura:")
    print(state['structure'])

    if plot:
        if TreePlot().save(player.tree, output, title=f"AVL ({len(player.tree)} nós)"):
            print(f"\n>> Árvore salva em {output}")

    return player

if __name__ == "__main__":
    # Chaves opcionais pela linha de comando: python -m src.main 10 20 30
    cli_keys = [int(arg) for arg in sys.argv[1:]] or None
    main(cli_keys)
