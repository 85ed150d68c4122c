"""Command line interface replaying scripted Coup resolution rounds."""

import argparse
import logging
from typing import Callable, Dict, List, Optional
from .game import CoupGame
from .mediator import ActionMediator
from .actions import ActionFactory
from .reporter import LoggingObserver, ResolutionRecord
from .types import ActionType, CounterType
from .player import CoupPlayer


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Setup logging configuration."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


class CoupCLI:
    """Plays declared chains against a two-player game and prints the outcome."""

    def __init__(self, game: Optional[CoupGame] = None) -> None:
        self.game = game or CoupGame()
        if not self.game.state.players:
            self.game.add_player("Elder")
            self.game.add_player("Highlander")
            self.game.start_game()
        self.mediator = ActionMediator(observers=[LoggingObserver()])
        self.scenarios: Dict[str, Callable[[], List[ResolutionRecord]]] = {
            'steal': self.contested_steal,
            'tax': self.challenged_tax,
            'assassinate': self.contested_assassinate,
        }

    def run(self, names: List[str]) -> None:
        """Replay the named scenarios in order."""
        for name in names:
            if self.game.state.is_game_over():
                print("Game is over, skipping remaining scenarios")
                break

            print(f"\n--- {name} ---")
            for record in self.scenarios[name]():
                print(record.message)

        self._display_game_state()

    def contested_steal(self) -> List[ResolutionRecord]:
        """Elder steals, Highlander blocks, Elder exposes the bluffed block."""
        elder, high = self._seat(0), self._seat(1)
        self.mediator.declare(ActionFactory.create_action(ActionType.STEAL, elder, high))
        self.mediator.declare(ActionFactory.create_counter(CounterType.COUNTER_STEAL, high))
        self.mediator.declare(ActionFactory.create_challenge(elder, high))
        return self.mediator.resolve_as_success(self.game)

    def challenged_tax(self) -> List[ResolutionRecord]:
        """Highlander taxes and proves the Duke when Elder challenges."""
        elder, high = self._seat(0), self._seat(1)
        self.mediator.declare(ActionFactory.create_action(ActionType.TAX, high))
        self.mediator.declare(ActionFactory.create_challenge(elder, high))
        return self.mediator.resolve_as_failure(self.game)

    def contested_assassinate(self) -> List[ResolutionRecord]:
        """Highlander assassinates, Elder claims Contessa and is caught bluffing."""
        elder, high = self._seat(0), self._seat(1)
        self.mediator.declare(ActionFactory.create_action(ActionType.ASSASSINATE, high, elder))
        self.mediator.declare(ActionFactory.create_counter(CounterType.COUNTER_ASSASSINATE, elder))
        self.mediator.declare(ActionFactory.create_challenge(high, elder))
        return self.mediator.resolve_as_success(self.game)

    def _seat(self, index: int) -> CoupPlayer:
        return self.game.state.players[index]

    def _display_game_state(self) -> None:
        """Display current game state."""
        state = self.game.get_game_state()
        print("\n" + "="*50)
        print("GAME STATE")
        print("="*50)

        for i, player in enumerate(state['players']):
            if player['eliminated']:
                print(f"{i+1}. {player['name']}: ELIMINATED")
            else:
                print(f"{i+1}. {player['name']}: {player['coins']} coins, {player['influence']} influence")

        print(f"Bank: {state['bank']} coins")
        if state['winner']:
            print(f"\n{state['winner']} wins the game!")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Replay scripted Coup resolution rounds')
    parser.add_argument('--scenario', choices=['steal', 'tax', 'assassinate', 'all'], default='all',
                        help='Scenario to replay')
    parser.add_argument('--log-level', type=str, default='WARNING', help='Logging level')
    parser.add_argument('--log-file', type=str, default=None, help='Also write logs to this file')

    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    names = ['steal', 'tax', 'assassinate'] if args.scenario == 'all' else [args.scenario]
    cli = CoupCLI()
    cli.run(names)


if __name__ == "__main__":
    main()
