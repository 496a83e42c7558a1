"""
Avengement Lite rule engine.

Pure functions: every transition returns a fresh GameState and never
mutates its input.

Turn flow:
    Rest      +1 HP, +1 AP, ends the turn
    Move      1-2 squares in a straight line, 1 AP, turn continues
    Strike    2 damage to an adjacent enemy, 1 AP, turn continues
    Lunging   3 AP, three combos of area strikes with repositioning,
              ends the turn and stuns the mover for one round
    End Turn  +1 AP, hands over to the opponent

Move generation prunes two dominated options: stepping straight back to
the square just vacated, and ending a turn without having done anything
while AP is below the cap.
"""

from __future__ import annotations

import random
from typing import List, Optional

from avengement_solver.core.types import (
    INSTANT_WIN_AP,
    INSTANT_WIN_HP,
    LUNGING_COMBOS,
    LUNGING_COST,
    MAX_AP,
    MOVE_COST,
    STRIKE_COST,
    STRIKE_DAMAGE,
    Move,
    MoveKind,
    opponent,
)
from avengement_solver.games.game_rules import adjacent_cells_with, reachable_cells
from avengement_solver.games.game_state import GameState


def legal_moves(state: GameState) -> List[Move]:
    """
    Return all legal moves for the player to act.

    Order: Rest, Move targets, Strike targets, Lunging, End Turn.
    """
    player = state.mover
    enemy_id = opponent(state.current_player)

    # Stunned players can only pass
    if player.stunned:
        return [Move.end_turn(stunned=True)]

    moves = [Move.rest()]

    if player.ap >= MOVE_COST:
        for r, c in reachable_cells(state.board, player.position):
            if state.last_position == (r, c):
                continue
            moves.append(Move.move_to(r, c))

    if player.ap >= STRIKE_COST:
        for r, c in adjacent_cells_with(state.board, player.position, enemy_id):
            moves.append(Move.strike_at(r, c))

    if player.ap >= LUNGING_COST:
        moves.append(Move.lunging())

    # An idle end turn is strictly worse than resting
    if player.ap != state.turn_start_ap or player.ap >= MAX_AP:
        moves.append(Move.end_turn())

    return moves


def apply_move(
    state: GameState,
    move: Move,
    *,
    validated: bool = False,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Apply a move and return the successor state.

    Args:
        state: Position to advance (left untouched).
        move: The move to apply.
        validated: If True, skip the legality check (caller guarantees
                   the move came from legal_moves()).
        rng: Random source for Lunging repositioning (default: module random).

    Raises:
        ValueError: If the move is not legal in `state`.
    """
    if not validated and move not in legal_moves(state):
        raise ValueError(f"Illegal move for player {state.current_player}: {move.description or move}")

    new_state = state.copy()
    player = new_state.mover
    enemy = new_state.enemy

    if move.kind is MoveKind.REST:
        player.hp += 1
        player.ap += 1
        player.clamp()
        end_turn(new_state)

    elif move.kind is MoveKind.MOVE:
        new_state.last_position = player.position
        new_state.board[player.position] = 0
        new_state.board[move.target] = new_state.current_player
        player.position = move.target
        player.ap -= MOVE_COST
        player.clamp()

    elif move.kind is MoveKind.STRIKE:
        enemy.hp -= STRIKE_DAMAGE
        player.ap -= STRIKE_COST
        if enemy.hp <= 0:
            new_state.game_over = True
        enemy.clamp()
        player.clamp()

    elif move.kind is MoveKind.LUNGING:
        execute_lunging(new_state, rng or random)
        end_turn(new_state)

    elif move.kind is MoveKind.END_TURN:
        end_turn(new_state)

    else:
        raise ValueError(f"Unknown move kind: {move.kind}")

    return new_state


def end_turn(state: GameState) -> None:
    """Close the current player's turn in place."""
    player = state.mover

    # A stun applied this turn survives until the end of the next own turn
    if player.stunned and not player.stunned_this_turn:
        player.stunned = False
    player.stunned_this_turn = False

    player.ap += 1
    player.clamp()

    state.current_player = opponent(state.current_player)
    state.turn_start_ap = state.mover.ap
    state.last_position = None


def execute_lunging(state: GameState, rng=random) -> None:
    """Three combos of area strikes, in place; the mover ends up stunned.

    Does not end the turn (apply_move does that).
    """
    player = state.mover
    enemy = state.enemy
    enemy_id = opponent(state.current_player)

    player.ap -= LUNGING_COST
    player.clamp()

    first_strike_hit = bool(adjacent_cells_with(state.board, player.position, enemy_id))

    for combo in range(LUNGING_COMBOS):
        for _ in adjacent_cells_with(state.board, player.position, enemy_id):
            enemy.hp -= STRIKE_DAMAGE
            if enemy.hp <= 0:
                enemy.clamp()
                state.game_over = True
                return

        # A landed opener keeps the mover in place until the last combo
        should_move = combo == LUNGING_COMBOS - 1 if first_strike_hit else True
        if should_move:
            destinations = reachable_cells(state.board, player.position)
            if destinations:
                target = rng.choice(destinations)
                state.board[player.position] = 0
                state.board[target] = state.current_player
                player.position = target

    player.stunned = True
    player.stunned_this_turn = True


def has_instant_win(state: GameState) -> bool:
    """
    Cheap sufficient test for a forced win this turn.

    True when the mover is not stunned and either already adjacent with
    at least 4 AP, or holding 5+ AP with a single move that lands adjacent;
    in both cases the enemy must be on 7 HP or less. Misses other wins.
    """
    player = state.mover
    enemy = state.enemy
    enemy_id = opponent(state.current_player)

    if player.stunned:
        return False

    if adjacent_cells_with(state.board, player.position, enemy_id) and player.ap >= INSTANT_WIN_AP:
        return enemy.hp <= INSTANT_WIN_HP

    if player.ap >= INSTANT_WIN_AP + MOVE_COST:
        for dest in reachable_cells(state.board, player.position):
            if adjacent_cells_with(state.board, dest, enemy_id):
                return enemy.hp <= INSTANT_WIN_HP

    return False


def is_terminal(state: GameState) -> bool:
    return state.game_over or state.players[1].hp <= 0 or state.players[2].hp <= 0


def winner(state: GameState) -> Optional[int]:
    """Player whose opponent is out of HP, or None while both stand."""
    if state.players[1].hp <= 0:
        return 2
    if state.players[2].hp <= 0:
        return 1
    return None
