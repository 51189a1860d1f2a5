"""
Deterministic seed data.

Everything is derived from a fixed base date and a fixed linear congruential
generator, so two builds of the data set are identical record for record.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Dict, List

from caffissimo.config import settings
from caffissimo.models import (
    AttendanceEntry,
    AttendanceStatus,
    AuditAction,
    AuditLog,
    Branch,
    BranchProduct,
    Category,
    DayHours,
    EntrySource,
    ExternalSalesEntry,
    FridgeStockReport,
    FridgeTemperatureEntry,
    Offer,
    Order,
    OrderItem,
    OrderSource,
    OrderStatus,
    PaymentMethod,
    Platform,
    PosSession,
    Product,
    Role,
    StatusHistoryEntry,
    StoreSettings,
    User,
)

logger = logging.getLogger(__name__)

CATALOG_DATE = datetime(2024, 1, 15, 8, 0, 0)

FRIDGE_UNITS = ["Main Fridge", "Milk Fridge", "Pastry Display Fridge", "Walk-in Cooler"]

BASE_PRICES = {
    "cat-1": 4.50,
    "cat-2": 5.25,
    "cat-3": 5.00,
    "cat-4": 3.75,
    "cat-5": 9.50,
    "cat-6": 16.00,
}

# branch id -> price offset against the base price
BRANCH_PRICE_OFFSETS = {"branch-1": 0.0, "branch-2": 0.25, "branch-3": -0.25}


@dataclass
class SeedData:
    branches: List[Branch] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    products: List[Product] = field(default_factory=list)
    branch_products: List[BranchProduct] = field(default_factory=list)
    users: List[User] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)
    external_sales: List[ExternalSalesEntry] = field(default_factory=list)
    offers: List[Offer] = field(default_factory=list)
    fridge_reports: List[FridgeStockReport] = field(default_factory=list)
    attendance: List[AttendanceEntry] = field(default_factory=list)
    pos_sessions: List[PosSession] = field(default_factory=list)
    audit_logs: List[AuditLog] = field(default_factory=list)
    store_settings: StoreSettings = None


def seeded_random(seed: int) -> Callable[[], float]:
    """LCG returning floats in [0, 1]."""
    state = seed

    def next_value() -> float:
        nonlocal state
        state = (state * 1103515245 + 12345) & 0x7FFFFFFF
        return state / 0x7FFFFFFF

    return next_value


def _pick(random: Callable[[], float], options: list):
    return options[min(int(random() * len(options)), len(options) - 1)]


def _hours(open_close: Dict[str, tuple]) -> Dict[str, DayHours]:
    return {day: DayHours(open=o, close=c) for day, (o, c) in open_close.items()}


def build_branches() -> List[Branch]:
    def week(weekday, friday, saturday, sunday):
        days = {d: weekday for d in ("monday", "tuesday", "wednesday", "thursday")}
        days.update(friday=friday, saturday=saturday, sunday=sunday)
        return _hours(days)

    return [
        Branch(
            id="branch-1", name="Downtown Caffissimo",
            address="123 Main Street, Downtown, CA 90001",
            phone="(555) 123-4567", email="downtown@caffissimo.com", is_open=True,
            opening_hours=week(("06:00", "20:00"), ("06:00", "21:00"), ("07:00", "21:00"), ("07:00", "18:00")),
            uber_eats_url="https://ubereats.com/caffissimo-downtown",
            door_dash_url="https://doordash.com/caffissimo-downtown",
            created_at=datetime(2024, 1, 15, 8), updated_at=datetime(2024, 1, 15, 8),
        ),
        Branch(
            id="branch-2", name="Westside Caffissimo",
            address="456 Ocean Boulevard, Westside, CA 90002",
            phone="(555) 234-5678", email="westside@caffissimo.com", is_open=True,
            opening_hours=week(("07:00", "19:00"), ("07:00", "20:00"), ("08:00", "20:00"), ("08:00", "17:00")),
            uber_eats_url="https://ubereats.com/caffissimo-westside",
            door_dash_url="https://doordash.com/caffissimo-westside",
            created_at=datetime(2024, 3, 1, 8), updated_at=datetime(2024, 3, 1, 8),
        ),
        Branch(
            id="branch-3", name="University Caffissimo",
            address="789 College Ave, University District, CA 90003",
            phone="(555) 345-6789", email="university@caffissimo.com", is_open=False,
            opening_hours=week(("06:30", "22:00"), ("06:30", "23:00"), ("08:00", "23:00"), ("09:00", "20:00")),
            uber_eats_url="https://ubereats.com/caffissimo-university",
            door_dash_url="https://doordash.com/caffissimo-university",
            created_at=datetime(2024, 6, 15, 8), updated_at=datetime(2024, 6, 15, 8),
        ),
    ]


def build_categories() -> List[Category]:
    rows = [
        ("cat-1", "Espresso Drinks", "Classic espresso-based beverages"),
        ("cat-2", "Cold Brew & Iced", "Refreshing cold coffee drinks"),
        ("cat-3", "Tea & Specialty", "Premium teas and specialty drinks"),
        ("cat-4", "Pastries", "Fresh baked goods"),
        ("cat-5", "Sandwiches", "Fresh made sandwiches"),
        ("cat-6", "Merchandise", "Coffee beans and merchandise"),
    ]
    return [
        Category(id=cid, name=name, description=desc, sort_order=i + 1)
        for i, (cid, name, desc) in enumerate(rows)
    ]


PRODUCT_ROWS = [
    # (category, name, description, tags)
    ("cat-1", "Classic Espresso", "Rich, bold single or double shot of espresso", ["hot", "classic", "strong"]),
    ("cat-1", "Caffissimo Latte", "Smooth espresso with steamed milk and light foam", ["hot", "popular", "creamy"]),
    ("cat-1", "Cappuccino", "Equal parts espresso, steamed milk, and foam", ["hot", "classic", "frothy"]),
    ("cat-1", "Americano", "Espresso diluted with hot water", ["hot", "classic", "strong"]),
    ("cat-1", "Flat White", "Velvety microfoam with ristretto shots", ["hot", "smooth", "popular"]),
    ("cat-1", "Mocha", "Espresso with chocolate and steamed milk", ["hot", "sweet", "chocolate"]),
    ("cat-1", "Caramel Macchiato", "Vanilla-flavored latte with caramel drizzle", ["hot", "sweet", "popular"]),
    ("cat-2", "Signature Cold Brew", "20-hour steeped cold brew coffee", ["cold", "popular", "smooth"]),
    ("cat-2", "Iced Latte", "Espresso poured over cold milk and ice", ["cold", "refreshing", "creamy"]),
    ("cat-2", "Nitro Cold Brew", "Cold brew infused with nitrogen for a creamy texture", ["cold", "premium", "smooth"]),
    ("cat-2", "Vanilla Sweet Cream Cold Brew", "Cold brew topped with vanilla sweet cream", ["cold", "sweet", "popular"]),
    ("cat-2", "Iced Americano", "Espresso with cold water over ice", ["cold", "refreshing", "strong"]),
    ("cat-3", "Chai Latte", "Spiced black tea with steamed milk", ["hot", "spiced", "sweet"]),
    ("cat-3", "Matcha Latte", "Premium Japanese matcha with steamed milk", ["hot", "earthy", "healthy"]),
    ("cat-3", "London Fog", "Earl Grey tea with vanilla and steamed milk", ["hot", "aromatic", "calming"]),
    ("cat-3", "Golden Turmeric Latte", "Anti-inflammatory turmeric blend with milk", ["hot", "healthy", "spiced"]),
    ("cat-3", "Hot Chocolate", "Rich Belgian chocolate with steamed milk", ["hot", "sweet", "indulgent"]),
    ("cat-4", "Butter Croissant", "Flaky, buttery French croissant", ["bakery", "classic", "buttery"]),
    ("cat-4", "Almond Croissant", "Croissant filled with almond cream", ["bakery", "sweet", "nutty"]),
    ("cat-4", "Blueberry Muffin", "Moist muffin loaded with fresh blueberries", ["bakery", "fruity", "breakfast"]),
    ("cat-4", "Chocolate Chip Cookie", "Freshly baked with Belgian chocolate", ["bakery", "sweet", "chocolate"]),
    ("cat-4", "Cinnamon Roll", "Warm, gooey cinnamon roll with cream cheese frosting", ["bakery", "sweet", "warm"]),
    ("cat-4", "Banana Bread", "Moist banana bread with walnuts", ["bakery", "classic", "nutty"]),
    ("cat-5", "Avocado Toast", "Smashed avocado on artisan sourdough", ["savory", "healthy", "breakfast"]),
    ("cat-5", "Turkey Club", "Roasted turkey, bacon, lettuce, tomato", ["savory", "lunch", "protein"]),
    ("cat-5", "Caprese Panini", "Fresh mozzarella, tomato, basil, balsamic", ["savory", "vegetarian", "lunch"]),
    ("cat-5", "Breakfast Burrito", "Eggs, cheese, salsa, choice of protein", ["savory", "breakfast", "filling"]),
    ("cat-6", "House Blend Beans (12oz)", "Our signature medium roast blend", ["beans", "merchandise"]),
    ("cat-6", "Single Origin Ethiopia (12oz)", "Bright, fruity Ethiopian beans", ["beans", "single-origin"]),
    ("cat-6", "Caffissimo Travel Mug", "16oz insulated stainless steel mug", ["merchandise", "drinkware"]),
]


def build_products() -> List[Product]:
    products = []
    for i, (category_id, name, description, tags) in enumerate(PRODUCT_ROWS, start=1):
        slug = name.lower().split(" (")[0].replace(" ", "-")
        products.append(Product(
            id=f"prod-{i}",
            name=name,
            description=description,
            category_id=category_id,
            images=[f"/products/{slug}.jpg"],
            tags=tags,
            created_at=CATALOG_DATE,
            updated_at=CATALOG_DATE,
        ))
    return products


def build_branch_products(branches: List[Branch], products: List[Product]) -> List[BranchProduct]:
    result = []
    seq = 1
    for branch in branches:
        for product in products:
            price = BASE_PRICES.get(product.category_id, 5.00) + BRANCH_PRICE_OFFSETS.get(branch.id, 0.0)
            result.append(BranchProduct(
                id=f"bp-{seq}",
                product_id=product.id,
                branch_id=branch.id,
                price=round(price, 2),
                is_available=seq % 10 != 0,
                is_visible=seq % 20 != 0,
                created_at=CATALOG_DATE,
                updated_at=CATALOG_DATE,
            ))
            seq += 1
    return result


def build_users() -> List[User]:
    rows = [
        ("user-1", "Alex Johnson", "alex", Role.SUPER_ADMIN, None, True, datetime(2024, 1, 1, 8)),
        ("user-2", "Maria Garcia", "maria", Role.BRANCH_OWNER, "branch-1", True, datetime(2024, 1, 15, 8)),
        ("user-3", "James Wilson", "james", Role.BRANCH_OWNER, "branch-2", True, datetime(2024, 3, 1, 8)),
        ("user-4", "Sarah Chen", "sarah", Role.BRANCH_OWNER, "branch-3", True, datetime(2024, 6, 15, 8)),
        ("user-5", "Michael Brown", "michael", Role.SUPERVISOR, "branch-1", True, datetime(2024, 2, 1, 8)),
        ("user-6", "Emily Davis", "emily", Role.SUPERVISOR, "branch-2", True, datetime(2024, 4, 1, 8)),
        ("user-7", "David Lee", "david", Role.CASHIER, "branch-1", True, datetime(2024, 2, 15, 8)),
        ("user-8", "Jessica Martinez", "jessica", Role.CASHIER, "branch-1", True, datetime(2024, 2, 15, 8)),
        ("user-9", "Chris Taylor", "chris", Role.CASHIER, "branch-2", True, datetime(2024, 4, 15, 8)),
        ("user-10", "Amanda White", "amanda", Role.CASHIER, "branch-3", False, datetime(2024, 7, 1, 8)),
    ]
    return [
        User(
            id=uid, name=name, email=f"{handle}@caffissimo.com", role=role, branch_id=branch_id,
            is_active=active, created_at=created, updated_at=created,
        )
        for uid, name, handle, role, branch_id, active, created in rows
    ]


def build_orders(
    base_date: datetime,
    branches: List[Branch],
    products: List[Product],
    branch_products: List[BranchProduct],
    count: int,
    random_seed: int,
) -> List[Order]:
    sources = [OrderSource.POS, OrderSource.POS, OrderSource.POS,
               OrderSource.ECOMMERCE, OrderSource.UBER_EATS, OrderSource.DOORDASH]
    statuses = [OrderStatus.COMPLETED, OrderStatus.COMPLETED, OrderStatus.COMPLETED, OrderStatus.COMPLETED,
                OrderStatus.CANCELLED, OrderStatus.READY, OrderStatus.PREPARING]
    payment_methods = [PaymentMethod.CASH, PaymentMethod.CARD, PaymentMethod.CARD,
                       PaymentMethod.CARD, PaymentMethod.ONLINE]
    customer_names = ["John D.", "Sarah M.", "Mike T.", "Emma R.", "Alex K.",
                      "Lisa P.", "Tom H.", "Jane S.", None, None]
    prices = {(bp.branch_id, bp.product_id): bp.price for bp in branch_products}

    random = seeded_random(random_seed)
    orders = []

    for i in range(count):
        days_ago = int(random() * 30)
        hours_ago = int(random() * 14) + 6
        order_date = base_date - timedelta(days=days_ago, hours=hours_ago)

        source = _pick(random, sources)
        branch = _pick(random, branches)
        status = _pick(random, statuses)

        items = []
        for j in range(int(random() * 4) + 1):
            product = _pick(random, products)
            quantity = int(random() * 2) + 1
            unit_price = prices.get((branch.id, product.id), 5.00)
            items.append(OrderItem(
                id=f"item-{i}-{j}",
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=unit_price,
                total_price=round(unit_price * quantity, 2),
            ))

        subtotal = round(sum(item.total_price for item in items), 2)
        tax = round(subtotal * settings.TAX_RATE, 2)
        discount = round(subtotal * 0.1, 2) if random() > 0.8 else 0.0
        total = round(subtotal + tax - discount, 2)

        is_delivery = source in (OrderSource.UBER_EATS, OrderSource.DOORDASH)
        if is_delivery:
            payment_method = PaymentMethod.EXTERNAL
        elif source == OrderSource.ECOMMERCE:
            payment_method = PaymentMethod.ONLINE
        else:
            payment_method = _pick(random, payment_methods)

        if source == OrderSource.POS and random() > 0.5:
            customer_name = None
        else:
            customer_name = _pick(random, customer_names)

        history = [
            StatusHistoryEntry(status=OrderStatus.PENDING, timestamp=order_date),
            StatusHistoryEntry(status=OrderStatus.CONFIRMED, timestamp=order_date + timedelta(minutes=3)),
        ]
        if status not in (OrderStatus.PENDING, OrderStatus.CONFIRMED):
            history.append(StatusHistoryEntry(status=status, timestamp=order_date + timedelta(minutes=30)))

        orders.append(Order(
            id=f"order-{i + 1}",
            order_number=f"ORD-{order_date:%Y%m%d}-{i + 1:04d}",
            branch_id=branch.id,
            source=source,
            status=status,
            items=items,
            subtotal=subtotal,
            tax=tax,
            discount=discount,
            total=total,
            payment_method=payment_method,
            customer_name=customer_name,
            customer_email=f"{customer_name.lower().replace(' ', '.')}@email.com" if customer_name else None,
            notes="Extra hot please" if i % 5 == 0 else None,
            internal_notes="Customer requested cancellation" if status == OrderStatus.CANCELLED else None,
            external_order_id=f"EXT-{i + 1000}" if is_delivery else None,
            is_read_only=is_delivery,
            status_history=history,
            created_at=order_date,
            updated_at=order_date + timedelta(minutes=30),
        ))

    return sorted(orders, key=lambda o: o.created_at, reverse=True)


def build_external_sales(base_date: datetime, branches: List[Branch]) -> List[ExternalSalesEntry]:
    entries = []
    seq = 1
    for days_ago in range(30):
        day = base_date - timedelta(days=days_ago)
        for branch in branches:
            if days_ago % 5 != 0:
                entries.append(ExternalSalesEntry(
                    id=f"ext-{seq}",
                    branch_id=branch.id,
                    platform=Platform.UBER_EATS,
                    date=day.date(),
                    total_sales=float(100 + (seq * 37) % 300),
                    order_count=5 + (seq + 1) % 15,
                    source=EntrySource.IMPORT if (seq + 1) % 2 == 0 else EntrySource.MANUAL,
                    created_at=day,
                ))
                seq += 1
            if days_ago % 4 != 0:
                entries.append(ExternalSalesEntry(
                    id=f"ext-{seq}",
                    branch_id=branch.id,
                    platform=Platform.DOORDASH,
                    date=day.date(),
                    total_sales=float(80 + (seq * 23) % 250),
                    order_count=4 + (seq + 1) % 12,
                    source=EntrySource.IMPORT if (seq + 1) % 2 == 0 else EntrySource.MANUAL,
                    created_at=day,
                ))
                seq += 1
    return entries


def build_offers(base_date: datetime) -> List[Offer]:
    return [
        Offer(
            id="offer-1", name="Morning Rush 20% Off",
            description="20% off all espresso drinks before 9am",
            discount_type="percent", discount_value=20,
            start_date=base_date - timedelta(days=5), end_date=base_date + timedelta(days=30),
            category_ids=["cat-1"], branch_ids=["branch-1", "branch-2", "branch-3"],
            created_at=base_date - timedelta(days=5), updated_at=base_date - timedelta(days=5),
        ),
        Offer(
            id="offer-2", name="$2 Off Cold Brew",
            description="$2 off any cold brew on Fridays",
            discount_type="fixed", discount_value=2,
            start_date=base_date - timedelta(days=10), end_date=base_date + timedelta(days=20),
            category_ids=["cat-2"], branch_ids=["branch-1"],
            created_at=base_date - timedelta(days=10), updated_at=base_date - timedelta(days=10),
        ),
        Offer(
            id="offer-3", name="Student Discount",
            description="15% off with valid student ID",
            discount_type="percent", discount_value=15,
            start_date=base_date - timedelta(days=60), end_date=base_date + timedelta(days=90),
            branch_ids=["branch-3"],
            created_at=base_date - timedelta(days=60), updated_at=base_date - timedelta(days=60),
        ),
    ]


def build_fridge_reports(base_date: datetime, branches: List[Branch], users: List[User]) -> List[FridgeStockReport]:
    supervisors = {u.branch_id: u.name for u in users if u.role == Role.SUPERVISOR}
    reports = []
    temp_seed = 100
    for days_ago in range(14):
        day = base_date - timedelta(days=days_ago)
        for branch in branches:
            temperatures = []
            for idx, name in enumerate(FRIDGE_UNITS):
                temperatures.append(FridgeTemperatureEntry(
                    name=name,
                    temperature=round(34 + ((temp_seed * 7 + idx) % 10) * 0.5, 1),
                ))
                temp_seed += 1
            reports.append(FridgeStockReport(
                id=f"fridge-{branch.id}-{day:%Y-%m-%d}",
                branch_id=branch.id,
                date=day.date(),
                temperatures=temperatures,
                notes="Walk-in cooler running slightly warm" if days_ago % 3 == 0 else None,
                submitted_by=supervisors.get(branch.id, "Staff"),
                created_at=day,
            ))
    return reports


def build_attendance(base_date: datetime, users: List[User]) -> List[AttendanceEntry]:
    staff = [u for u in users if u.role in (Role.CASHIER, Role.SUPERVISOR)]
    entries = []
    att_seed = 200
    for days_ago in range(14):
        day = base_date - timedelta(days=days_ago)
        for user in staff:
            status_val = (att_seed * 13) % 100
            att_seed += 1
            if status_val < 5:
                status = AttendanceStatus.ABSENT
            elif status_val < 15:
                status = AttendanceStatus.LATE
            else:
                status = AttendanceStatus.PRESENT

            check_in_min = (att_seed * 3) % 30
            check_out_hour = 16 + (att_seed * 5) % 3
            check_out_min = (att_seed * 7) % 60
            present = status != AttendanceStatus.ABSENT
            entries.append(AttendanceEntry(
                id=f"att-{user.id}-{day:%Y-%m-%d}",
                branch_id=user.branch_id,
                user_id=user.id,
                user_name=user.name,
                date=day.date(),
                status=status,
                check_in=f"{'09' if status == AttendanceStatus.LATE else '08'}:{check_in_min:02d}" if present else None,
                check_out=f"{check_out_hour}:{check_out_min:02d}" if present else None,
                created_at=day,
            ))
    return entries


def build_pos_sessions(base_date: datetime, users: List[User]) -> List[PosSession]:
    """Raw POS login/logout pairs for staff over the last 14 days.

    Sessions ending exactly POS_IDLE_TIMEOUT_MINUTES after the last activity
    are the ones the terminal closed by itself.
    """
    staff = [u for u in users if u.role in (Role.CASHIER, Role.SUPERVISOR) and u.is_active]
    idle = timedelta(minutes=settings.POS_IDLE_TIMEOUT_MINUTES)
    sessions = []
    seq = 1
    for days_ago in range(14):
        day_start = (base_date - timedelta(days=days_ago)).replace(hour=7, minute=0, second=0, microsecond=0)
        for u_idx, user in enumerate(staff):
            login = day_start + timedelta(minutes=(days_ago * 11 + u_idx * 7) % 60)
            session_count = 1 + (days_ago + u_idx) % 3
            for s in range(session_count):
                last_activity = login + timedelta(minutes=90 + ((seq * 17) % 120))
                auto = (seq % 3 == 0) and s < session_count - 1
                logout = last_activity + (idle if auto else timedelta(minutes=(seq % 4)))
                sessions.append(PosSession(
                    id=f"pos-{seq}",
                    branch_id=user.branch_id,
                    user_id=user.id,
                    user_name=user.name,
                    login_at=login,
                    logout_at=logout,
                    last_activity_at=last_activity,
                ))
                seq += 1
                login = logout + timedelta(minutes=20 + (seq % 30))
    return sessions


def build_audit_logs(base_date: datetime, users: List[User]) -> List[AuditLog]:
    actions = [
        (AuditAction.PRICE_CHANGE, "BranchProduct"),
        (AuditAction.OFFER_CHANGE, "Offer"),
        (AuditAction.ORDER_CANCELLED, "Order"),
        (AuditAction.PRODUCT_UPDATED, "Product"),
        (AuditAction.BRANCH_UPDATED, "Branch"),
        (AuditAction.USER_CREATED, "User"),
    ]
    logs = []
    for i in range(50):
        created = base_date - timedelta(days=(i * 17) % 30)
        action, entity_type = actions[i % len(actions)]
        user = users[i % 4]
        if action == AuditAction.PRICE_CHANGE:
            details = {"oldPrice": 4.50, "newPrice": 4.75, "productName": "Caffissimo Latte"}
        elif action == AuditAction.ORDER_CANCELLED:
            details = {"orderId": f"order-{i}", "reason": "Customer request"}
        else:
            details = {"note": "Updated via admin panel"}
        logs.append(AuditLog(
            id=f"log-{i + 1}",
            action=action,
            entity_type=entity_type,
            entity_id=f"{entity_type.lower()}-{(i % 10) + 1}",
            user_id=user.id,
            user_name=user.name,
            branch_id=user.branch_id,
            details=details,
            created_at=created,
        ))
    return sorted(logs, key=lambda log: log.created_at, reverse=True)


def generate_seed_data(base_date: datetime = None, order_count: int = None, random_seed: int = None) -> SeedData:
    """Build the complete data set."""
    base_date = base_date or datetime.fromisoformat(settings.SEED_BASE_DATE)
    order_count = settings.SEED_ORDER_COUNT if order_count is None else order_count
    random_seed = settings.SEED_RANDOM_SEED if random_seed is None else random_seed

    branches = build_branches()
    categories = build_categories()
    products = build_products()
    branch_products = build_branch_products(branches, products)
    users = build_users()

    data = SeedData(
        branches=branches,
        categories=categories,
        products=products,
        branch_products=branch_products,
        users=users,
        orders=build_orders(base_date, branches, products, branch_products, order_count, random_seed),
        external_sales=build_external_sales(base_date, branches),
        offers=build_offers(base_date),
        fridge_reports=build_fridge_reports(base_date, branches, users),
        attendance=build_attendance(base_date, users),
        pos_sessions=build_pos_sessions(base_date, users),
        audit_logs=build_audit_logs(base_date, users),
        store_settings=StoreSettings(
            tax_rate=settings.TAX_RATE,
            service_fee_rate=settings.SERVICE_FEE_RATE,
            updated_at=base_date,
        ),
    )
    logger.info(
        "Generated seed data: %d orders, %d external sales entries, %d branches",
        len(data.orders), len(data.external_sales), len(data.branches),
    )
    return data
