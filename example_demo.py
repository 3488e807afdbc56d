"""Example demonstrating subcmd usage."""

from subcmd.config import DispatcherConfig
from subcmd.dispatcher import Dispatcher
from subcmd.help import render
from subcmd.models import Matched
from subcmd.registry import Registry
from subcmd.resolver import resolve


def build_example_registry() -> Registry:
    """Register a few toy subcommands."""
    registry = Registry()

    @registry.command()
    def greet(args: list[str]) -> int:
        """Say hello to everyone named on the command line."""
        for name in args or ['world']:
            print(f'Hello, {name}!')
        return 0

    @registry.command()
    def count(args: list[str]) -> int:
        """Print how many arguments were given."""
        print(len(args))
        return 0

    return registry


def demo_basic_usage() -> None:
    """Demonstrate basic subcmd functionality."""
    print('subcmd Demo')
    print('=' * 50)

    registry = build_example_registry()

    # Example 1: Render help
    print('\n1. Help text:')
    print(render(registry, 'example', 'A tiny example program'))

    # Example 2: Resolve names
    print('\n2. Resolving tokens:')
    for token in ('greet', 'gret', 'launch'):
        result = resolve(token, registry)
        if isinstance(result, Matched):
            print(f'   {token}: matched {result.subcommand.name}')
        else:
            print(f'   {token}: not found (best guess: {result.best_guess})')

    # Example 3: Dispatch
    print('\n3. Dispatching:')
    dispatcher = Dispatcher(registry, DispatcherConfig(program_name='example', color='never'))
    status = dispatcher.run(['greet', 'Ada', 'Grace'])
    print(f'   exit status: {status}')

    print('\nDemo completed successfully!')


if __name__ == '__main__':
    demo_basic_usage()
