"""Initial schema and seed data for FiviMedia LLC

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

This is the initial migration that creates all necessary tables and seeds default data
for the ordering service. This includes:
- Catalogue tables (states, coverage items, state coverage, add-ons)
- Order tables (orders, status history, promo codes)
- Content tables (languages, FAQ categories and FAQs with translations)
- Back-office tables (users, contact submissions, audit logs)
- The default admin account, the 50 states plus DC, default add-ons, languages,
  sample promo codes and FAQs

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op
from fivimedia_llc.server.services.auth import hash_password

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


COVERAGE_ITEMS = [
    {
        "key": "ein_filing",
        "title_en": "EIN Filing",
        "title_ar": "تقديم رقم تعريف صاحب العمل",
        "description_en": "We file for your Employer Identification Number with the IRS",
        "description_ar": "نقدم طلب رقم تعريف صاحب العمل الخاص بك لدى مصلحة الضرائب",
        "sort_order": 1,
    },
    {
        "key": "registered_agent",
        "title_en": "Registered Agent",
        "title_ar": "الوكيل المسجل",
        "description_en": "Professional registered agent service for your LLC",
        "description_ar": "خدمة الوكيل المسجل المحترف لشركتك",
        "sort_order": 2,
    },
    {
        "key": "mailing_address",
        "title_en": "Business Mailing Address",
        "title_ar": "عنوان البريد التجاري",
        "description_en": "A physical mailing address for your business",
        "description_ar": "عنوان بريدي فعلي لعملك",
        "sort_order": 3,
    },
    {
        "key": "boi_filing",
        "title_en": "BOI Filing",
        "title_ar": "تقديم معلومات المالك المستفيد",
        "description_en": "Beneficial Ownership Information filing with FinCEN",
        "description_ar": "تقديم معلومات الملكية المستفيدة لدى FinCEN",
        "sort_order": 4,
    },
    {
        "key": "certificate_good_standing",
        "title_en": "Certificate of Good Standing",
        "title_ar": "شهادة حسن السير",
        "description_en": "Official certificate showing your LLC is in good standing",
        "description_ar": "شهادة رسمية تثبت أن شركتك في وضع جيد",
        "sort_order": 5,
    },
]

# (code, name, base_price, is_recommended)
STATES = [
    ("WY", "Wyoming", 199, True),
    ("FL", "Florida", 249, True),
    ("TX", "Texas", 299, True),
    ("MT", "Montana", 199, True),
    ("NM", "New Mexico", 199, True),
    ("DE", "Delaware", 349, False),
    ("NV", "Nevada", 299, False),
    ("CA", "California", 399, False),
    ("NY", "New York", 399, False),
    ("AL", "Alabama", 249, False),
    ("AK", "Alaska", 299, False),
    ("AZ", "Arizona", 249, False),
    ("AR", "Arkansas", 249, False),
    ("CO", "Colorado", 249, False),
    ("CT", "Connecticut", 299, False),
    ("GA", "Georgia", 249, False),
    ("HI", "Hawaii", 299, False),
    ("ID", "Idaho", 249, False),
    ("IL", "Illinois", 299, False),
    ("IN", "Indiana", 249, False),
    ("IA", "Iowa", 249, False),
    ("KS", "Kansas", 249, False),
    ("KY", "Kentucky", 249, False),
    ("LA", "Louisiana", 249, False),
    ("ME", "Maine", 249, False),
    ("MD", "Maryland", 299, False),
    ("MA", "Massachusetts", 349, False),
    ("MI", "Michigan", 249, False),
    ("MN", "Minnesota", 249, False),
    ("MS", "Mississippi", 249, False),
    ("MO", "Missouri", 249, False),
    ("NE", "Nebraska", 249, False),
    ("NH", "New Hampshire", 249, False),
    ("NJ", "New Jersey", 299, False),
    ("NC", "North Carolina", 249, False),
    ("ND", "North Dakota", 249, False),
    ("OH", "Ohio", 249, False),
    ("OK", "Oklahoma", 249, False),
    ("OR", "Oregon", 249, False),
    ("PA", "Pennsylvania", 299, False),
    ("RI", "Rhode Island", 249, False),
    ("SC", "South Carolina", 249, False),
    ("SD", "South Dakota", 249, False),
    ("TN", "Tennessee", 249, False),
    ("UT", "Utah", 249, False),
    ("VT", "Vermont", 249, False),
    ("VA", "Virginia", 249, False),
    ("WA", "Washington", 299, False),
    ("WV", "West Virginia", 249, False),
    ("WI", "Wisconsin", 249, False),
    ("DC", "District of Columbia", 349, False),
]

ADD_ONS = [
    {
        "slug": "bank_setup",
        "name_en": "Bank Setup Assistance",
        "name_ar": "المساعدة في إعداد الحساب البنكي",
        "description_en": "We help you open a US business bank account",
        "description_ar": "نساعدك في فتح حساب بنكي تجاري أمريكي",
        "price": 99,
        "sort_order": 1,
    },
    {
        "slug": "business_address",
        "name_en": "Business Address",
        "name_ar": "عنوان العمل",
        "description_en": "A physical business address for your LLC",
        "description_ar": "عنوان عمل فعلي لشركتك",
        "price": 49,
        "sort_order": 2,
    },
    {
        "slug": "us_phone",
        "name_en": "US Phone Number",
        "name_ar": "رقم هاتف أمريكي",
        "description_en": "A dedicated US phone number for your business",
        "description_ar": "رقم هاتف أمريكي مخصص لعملك",
        "price": 29,
        "sort_order": 3,
    },
]

FAQ_CATEGORIES = {
    "general": (1, {"en": "General Questions", "ar": "الأسئلة العامة"}),
    "pricing": (2, {"en": "Pricing & Payments", "ar": "الأسعار والمدفوعات"}),
    "process": (3, {"en": "Formation Process", "ar": "عملية التأسيس"}),
}

# (category key, sort order, {locale: (question, answer)})
FAQS = [
    (
        "general",
        1,
        {
            "en": (
                "What is an LLC?",
                "An LLC (Limited Liability Company) is a business structure that combines the pass-through "
                "taxation of a partnership with the limited liability protection of a corporation. It protects "
                "your personal assets from business debts and lawsuits.",
            ),
            "ar": (
                "ما هي الشركة ذات المسؤولية المحدودة؟",
                "الشركة ذات المسؤولية المحدودة هي هيكل تجاري يجمع بين الضرائب المارة للشراكة مع حماية "
                "المسؤولية المحدودة للشركة. إنها تحمي أصولك الشخصية من ديون ودعاوى العمل.",
            ),
        },
    ),
    (
        "general",
        2,
        {
            "en": (
                "Do I need to be a US citizen to form an LLC?",
                "No, you do not need to be a US citizen or resident to form an LLC in the United States. "
                "Non-US residents can form and own an LLC in any state.",
            ),
            "ar": (
                "هل يجب أن أكون مواطناً أمريكياً لتأسيس شركة؟",
                "لا، لا تحتاج أن تكون مواطناً أمريكياً أو مقيماً لتأسيس شركة ذات مسؤولية محدودة في الولايات "
                "المتحدة. يمكن لغير المقيمين تأسيس وامتلاك شركة في أي ولاية.",
            ),
        },
    ),
    (
        "pricing",
        1,
        {
            "en": (
                "What is included in the base price?",
                "The base price includes LLC formation, EIN filing, registered agent service for the first year, "
                "business mailing address, BOI filing, and certificate of good standing.",
            ),
            "ar": (
                "ما الذي يتضمنه السعر الأساسي؟",
                "يتضمن السعر الأساسي تأسيس الشركة، تقديم رقم تعريف صاحب العمل، خدمة الوكيل المسجل للسنة الأولى، "
                "عنوان البريد التجاري، تقديم معلومات المالك المستفيد، وشهادة حسن السير.",
            ),
        },
    ),
    (
        "pricing",
        2,
        {
            "en": (
                "Why do prices vary by state?",
                "Each state has different filing fees and requirements for LLC formation. Our service fee "
                "combined with state filing fees results in different total prices for each state.",
            ),
            "ar": (
                "لماذا تختلف الأسعار حسب الولاية؟",
                "كل ولاية لديها رسوم تقديم ومتطلبات مختلفة لتأسيس الشركة. رسوم خدمتنا مع رسوم تقديم الولاية "
                "تؤدي إلى أسعار إجمالية مختلفة لكل ولاية.",
            ),
        },
    ),
    (
        "process",
        1,
        {
            "en": (
                "How long does it take to form an LLC?",
                "The formation timeline varies by state. Most states process LLC formations within 5-10 "
                "business days. EIN filing typically takes 10-12 business days after the LLC is formed.",
            ),
            "ar": (
                "كم يستغرق تأسيس الشركة؟",
                "يختلف الجدول الزمني للتأسيس حسب الولاية. معظم الولايات تعالج تأسيس الشركات خلال 5-10 أيام عمل. "
                "تقديم رقم تعريف صاحب العمل يستغرق عادة 10-12 يوم عمل بعد تأسيس الشركة.",
            ),
        },
    ),
    (
        "process",
        2,
        {
            "en": (
                "What documents will I receive?",
                "You will receive your Articles of Organization (formation document), Operating Agreement "
                "template, EIN confirmation letter, Certificate of Good Standing, and all filing receipts.",
            ),
            "ar": (
                "ما المستندات التي سأستلمها؟",
                "ستستلم مواد التنظيم (وثيقة التأسيس)، نموذج اتفاقية التشغيل، خطاب تأكيد رقم تعريف صاحب العمل، "
                "شهادة حسن السير، وجميع إيصالات التقديم.",
            ),
        },
    ),
]


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("role", sa.String(), nullable=False, server_default="admin"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_email", "email", unique=True),
    )

    # Create states table
    op.create_table(
        "states",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(2), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("base_price", sa.Float(), nullable=False),
        sa.Column("is_recommended", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_states_code", "code", unique=True),
    )

    # Create coverage_items table
    op.create_table(
        "coverage_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(100), nullable=False),
        sa.Column("title_en", sa.String(), nullable=False),
        sa.Column("title_ar", sa.String(), nullable=False),
        sa.Column("description_en", sa.String(), nullable=True),
        sa.Column("description_ar", sa.String(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_coverage_items_key", "key", unique=True),
    )

    # Create state_coverage table
    op.create_table(
        "state_coverage",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("state_id", sa.Integer(), nullable=False),
        sa.Column("coverage_item_id", sa.Integer(), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("processing_time", sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["state_id"], ["states.id"]),
        sa.ForeignKeyConstraint(["coverage_item_id"], ["coverage_items.id"]),
        sa.UniqueConstraint("state_id", "coverage_item_id", name="uq_state_coverage_state_item"),
        sa.Index("ix_state_coverage_state_id", "state_id"),
        sa.Index("ix_state_coverage_coverage_item_id", "coverage_item_id"),
    )

    # Create add_ons table
    op.create_table(
        "add_ons",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name_en", sa.String(), nullable=False),
        sa.Column("name_ar", sa.String(), nullable=False),
        sa.Column("description_en", sa.String(), nullable=True),
        sa.Column("description_ar", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_add_ons_slug", "slug", unique=True),
    )

    # Create orders table
    op.create_table(
        "orders",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("entity", sa.String(20), nullable=False, server_default="LLC"),
        sa.Column("state_id", sa.Integer(), nullable=False),
        sa.Column("state_code", sa.String(2), nullable=False),
        sa.Column("add_ons", sa.JSON(), nullable=False),
        sa.Column("customer_info", sa.JSON(), nullable=False),
        sa.Column("base_price", sa.Float(), nullable=False),
        sa.Column("add_on_total", sa.Float(), nullable=False, server_default="0"),
        sa.Column("discount_amount", sa.Float(), nullable=False, server_default="0"),
        sa.Column("promo_code", sa.String(50), nullable=True),
        sa.Column("total", sa.Float(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["state_id"], ["states.id"]),
        sa.Index("ix_orders_state_id", "state_id"),
        sa.Index("ix_orders_state_code", "state_code"),
        sa.Index("ix_orders_status", "status"),
        sa.Index("ix_orders_created_at", "created_at"),
    )

    # Create order_status_history table
    op.create_table(
        "order_status_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("order_id", sa.String(32), nullable=False),
        sa.Column("from_status", sa.String(), nullable=True),
        sa.Column("to_status", sa.String(), nullable=False),
        sa.Column("changed_by", sa.String(), nullable=False),
        sa.Column("changed_by_email", sa.String(255), nullable=True),
        sa.Column("note", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.Index("ix_order_status_history_order_id", "order_id"),
    )

    # Create promo_codes table
    op.create_table(
        "promo_codes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("usage_limit", sa.Integer(), nullable=True),
        sa.Column("used_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("expires_at", sa.DateTime(), nullable=True),
        sa.Column("min_order_amount", sa.Float(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_promo_codes_code", "code", unique=True),
    )

    # Create languages table
    op.create_table(
        "languages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("direction", sa.String(3), nullable=False, server_default="ltr"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_languages_code", "code", unique=True),
    )

    # Create FAQ tables
    op.create_table(
        "faq_categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(100), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_faq_categories_key", "key", unique=True),
    )

    op.create_table(
        "faq_category_translations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("locale", sa.String(10), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["faq_categories.id"]),
        sa.UniqueConstraint("category_id", "locale", name="uq_faq_category_translation_locale"),
        sa.Index("ix_faq_category_translations_category_id", "category_id"),
    )

    op.create_table(
        "faqs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["faq_categories.id"]),
        sa.Index("ix_faqs_category_id", "category_id"),
    )

    op.create_table(
        "faq_translations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("faq_id", sa.Integer(), nullable=False),
        sa.Column("locale", sa.String(10), nullable=False),
        sa.Column("question", sa.String(), nullable=False),
        sa.Column("answer", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["faq_id"], ["faqs.id"]),
        sa.UniqueConstraint("faq_id", "locale", name="uq_faq_translation_locale"),
        sa.Index("ix_faq_translations_faq_id", "faq_id"),
    )

    # Create contact_submissions table
    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="new"),
        sa.Column("notes", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_contact_submissions_email", "email"),
        sa.Index("ix_contact_submissions_status", "status"),
        sa.Index("ix_contact_submissions_created_at", "created_at"),
    )

    # Create audit_logs table
    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("user_email", sa.String(255), nullable=True),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("entity", sa.String(), nullable=False),
        sa.Column("entity_id", sa.String(64), nullable=True),
        sa.Column("changes", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_audit_logs_user_id", "user_id"),
        sa.Index("ix_audit_logs_entity", "entity"),
        sa.Index("ix_audit_logs_created_at", "created_at"),
    )

    _seed()


def _seed() -> None:
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    stamps = {"created_at": now, "updated_at": now}
    conn = op.get_bind()

    # Default admin account
    users = sa.table(
        "users",
        sa.column("email"),
        sa.column("password_hash"),
        sa.column("name"),
        sa.column("role"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(
        users,
        [
            {
                "email": "admin@fivimedia.com",
                "password_hash": hash_password("admin123"),
                "name": "Admin",
                "role": "admin",
                **stamps,
            }
        ],
    )

    coverage_items = sa.table(
        "coverage_items",
        sa.column("key"),
        sa.column("title_en"),
        sa.column("title_ar"),
        sa.column("description_en"),
        sa.column("description_ar"),
        sa.column("sort_order"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(coverage_items, [{**item, **stamps} for item in COVERAGE_ITEMS])

    states = sa.table(
        "states",
        sa.column("code"),
        sa.column("name"),
        sa.column("base_price"),
        sa.column("is_recommended"),
        sa.column("is_active"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(
        states,
        [
            {
                "code": code,
                "name": name,
                "base_price": price,
                "is_recommended": recommended,
                "is_active": True,
                **stamps,
            }
            for code, name, price, recommended in STATES
        ],
    )

    # Every coverage item is enabled in every state
    conn.execute(
        sa.text(
            "INSERT INTO state_coverage (state_id, coverage_item_id, enabled, processing_time) "
            "SELECT s.id, c.id, :enabled, "
            "CASE WHEN c.key = 'ein_filing' THEN '10-12 business days' ELSE NULL END "
            "FROM states s CROSS JOIN coverage_items c"
        ),
        {"enabled": True},
    )

    add_ons = sa.table(
        "add_ons",
        sa.column("slug"),
        sa.column("name_en"),
        sa.column("name_ar"),
        sa.column("description_en"),
        sa.column("description_ar"),
        sa.column("price"),
        sa.column("sort_order"),
        sa.column("is_active"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(add_ons, [{**add_on, "is_active": True, **stamps} for add_on in ADD_ONS])

    languages = sa.table(
        "languages",
        sa.column("code"),
        sa.column("name"),
        sa.column("direction"),
        sa.column("is_active"),
        sa.column("is_default"),
        sa.column("sort_order"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(
        languages,
        [
            {"code": "en", "name": "English", "direction": "ltr", "is_active": True, "is_default": True,
             "sort_order": 1, **stamps},
            {"code": "ar", "name": "العربية", "direction": "rtl", "is_active": True, "is_default": False,
             "sort_order": 2, **stamps},
        ],
    )

    promo_codes = sa.table(
        "promo_codes",
        sa.column("code"),
        sa.column("type"),
        sa.column("value"),
        sa.column("usage_limit"),
        sa.column("used_count"),
        sa.column("min_order_amount"),
        sa.column("is_active"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    op.bulk_insert(
        promo_codes,
        [
            {"code": code, "type": kind, "value": value, "usage_limit": limit, "used_count": 0,
             "min_order_amount": minimum, "is_active": True, **stamps}
            for code, kind, value, limit, minimum in [
                ("WELCOME10", "percentage", 10, 100, 100),
                ("SAVE50", "fixed", 50, 50, 200),
                ("FIRST20", "percentage", 20, 25, 150),
            ]
        ],
    )

    # FAQ categories and FAQs reference generated ids, so insert them row by row
    faq_categories = sa.table(
        "faq_categories",
        sa.column("id"),
        sa.column("key"),
        sa.column("sort_order"),
        sa.column("is_active"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    faq_category_translations = sa.table(
        "faq_category_translations",
        sa.column("category_id"),
        sa.column("locale"),
        sa.column("name"),
    )
    faqs = sa.table(
        "faqs",
        sa.column("id"),
        sa.column("category_id"),
        sa.column("sort_order"),
        sa.column("is_active"),
        sa.column("created_at"),
        sa.column("updated_at"),
    )
    faq_translations = sa.table(
        "faq_translations",
        sa.column("faq_id"),
        sa.column("locale"),
        sa.column("question"),
        sa.column("answer"),
    )

    category_ids = {}
    for key, (sort_order, names) in FAQ_CATEGORIES.items():
        category_id = conn.execute(
            faq_categories.insert()
            .values(key=key, sort_order=sort_order, is_active=True, **stamps)
            .returning(faq_categories.c.id)
        ).scalar_one()
        category_ids[key] = category_id
        conn.execute(
            faq_category_translations.insert(),
            [{"category_id": category_id, "locale": locale, "name": name} for locale, name in names.items()],
        )

    for category_key, sort_order, texts in FAQS:
        faq_id = conn.execute(
            faqs.insert()
            .values(category_id=category_ids[category_key], sort_order=sort_order, is_active=True, **stamps)
            .returning(faqs.c.id)
        ).scalar_one()
        conn.execute(
            faq_translations.insert(),
            [
                {"faq_id": faq_id, "locale": locale, "question": question, "answer": answer}
                for locale, (question, answer) in texts.items()
            ],
        )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("audit_logs")
    op.drop_table("contact_submissions")
    op.drop_table("faq_translations")
    op.drop_table("faqs")
    op.drop_table("faq_category_translations")
    op.drop_table("faq_categories")
    op.drop_table("languages")
    op.drop_table("promo_codes")
    op.drop_table("order_status_history")
    op.drop_table("orders")
    op.drop_table("add_ons")
    op.drop_table("state_coverage")
    op.drop_table("coverage_items")
    op.drop_table("states")
    op.drop_table("users")
