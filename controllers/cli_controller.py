from game.models import ItemKind


def print_event(event, payload, to=None):
    """Emitter for the engine: print narrative lines as they happen."""
    if event != "narrative":
        return
    if payload["type"] == "reveal":
        print(f"(psst, next shell is {payload['shell'] or 'nothing'})")
    elif payload["type"] == "shoot-announced":
        print(f"{payload.get('text')} {payload['shell'].upper()}")
    elif payload.get("text"):
        print(payload["text"])


class CLIController:
    """
    Hot-seat table in the terminal. Seats are local ids ("local-0", ...) and
    shots resolve immediately.
    """

    def __init__(self, engine, input_fn=input):
        self.engine = engine
        self.input = input_fn

    # -----------------------------
    # DISPLAY HELPERS
    # -----------------------------

    def show_state(self):
        state = self.engine.get_state()

        print("\n===== TABLE =====")
        print(f"Shells: {state['shellsRemaining']} of {state['shellCount']} left")
        for i, p in enumerate(state["players"]):
            marker = ">" if i == state["turn"] else " "
            hearts = "♥" * p["hp"] if p["alive"] else "dead"
            items = ", ".join(f"{k} x{v}" for k, v in p["items"].items() if v)
            saw = " [SAW]" if p["saw"] else ""
            print(f"{marker} [{i}] {p['name']}: {hearts}{saw}  ({items or 'no items'})")
        print("=================\n")

    # -----------------------------
    # MAIN GAME LOOP
    # -----------------------------

    def seat_players(self, names):
        for i, name in enumerate(names):
            self.engine.join(f"local-{i}", name)

    def run(self):
        print("=== BUCKSHOT ARENA ===")

        while not self.engine.state.game_over:
            current = self.engine.turns.current()
            if current is None:
                break
            self.show_state()
            self.handle_turn(current)

        winner = self.engine.get_state()["winner"]
        print(f"\nGAME OVER. Winner: {winner}")

    def handle_turn(self, player):
        print(f"{player.name}: 'shoot <seat>' or 'use <item>' ({', '.join(k.value for k in ItemKind)})")

        while True:
            parts = self.input("> ").strip().split()
            if len(parts) != 2:
                print("Enter a command and an argument.")
                continue

            command, arg = parts
            if command == "shoot":
                if not arg.isdigit():
                    print("Enter a seat number.")
                    continue
                result = self.engine.shoot(player.id, int(arg))
            elif command == "use":
                result = self.engine.use_item(player.id, arg)
            else:
                print("Unknown command.")
                continue

            if "error" in result:
                print(result["message"])
                continue
            return result
