#!/usr/bin/env python3
"""Watch the random agent play Minesweeper."""
import time
import os

from src.game.board import BEGINNER, BoardConfig
from src.game.environment import MinesweeperEnv
from src.agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def run_demo(config: BoardConfig = BEGINNER, games: int = 5, delay: float = 0.3):
    """Run demo games with visualization."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.rows, config.columns)

    density = 100 * config.mine_count / config.total_cells
    print(
        f"Board: {config.rows}x{config.columns} with {config.mine_count} "
        f"mines ({density:.1f}% density)"
    )
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset()
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, col = agent.action_to_position(action)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}\n")
            print(env.render())
            print(f"\nDug ({row + 1}, {col + 1}) -> reward {reward:+.1f}")
            print(f"{info['flags_left']} flags left, {info['spaces_left']} cells covered")
            time.sleep(delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOSS ***")
        time.sleep(1)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    run_demo()
