from synx import Arr, Obj

# A cart is a reactive list of line items, and the totals live in a reactive object
cart = Arr()
totals = Obj({"item_count": 0, "total": 0.0})


def recalculate(items):
    totals.item_count = sum(item["quantity"] for item in items)
    totals.total = sum(item["quantity"] * item["price"] for item in items)


def update_ui(summary):
    print(f">>> {summary.item_count} items, Cart Total: ${summary.total:.2f}")


cart.subscribe(recalculate)
totals.subscribe(update_ui)

print("=" * 50)

# Every change to the cart flows into the totals, and from there to the UI.
cart.append({"name": "book", "quantity": 1, "price": 10.0})
cart.append({"name": "pen", "quantity": 2, "price": 1.5})
cart.shift()

# ==================================================
# >>> 0 items, Cart Total: $0.00
# >>> 1 items, Cart Total: $0.00
# >>> 1 items, Cart Total: $10.00
# >>> 3 items, Cart Total: $10.00
# >>> 3 items, Cart Total: $13.00
# >>> 2 items, Cart Total: $13.00
# >>> 2 items, Cart Total: $3.00
