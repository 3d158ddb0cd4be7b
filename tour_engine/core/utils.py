def print_info(outcome):
        elapsed = outcome.elapsed_ms
        nps = int(outcome.nodes_expanded * 1000 / elapsed) if elapsed > 0 else 0

        print(f"info strategy {outcome.strategy} size {outcome.board_size} nodes {outcome.nodes_expanded} "
              f"nps {nps} time {int(elapsed)} status {outcome.status.value}")
