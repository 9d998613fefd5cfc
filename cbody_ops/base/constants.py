""" All Application Constants declare here... """

# Python Packages
from decouple import config, Csv


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
CORS_ORIGINS                    =   config('CORS_ORIGINS', default = '*', cast = Csv())


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "CBODY Ops",
                                "version": "1.0",
                                "description": "Back office API for CBODY operations: \
                                therapists, orders, finance settlements, media \
                                moderation and chat oversight."
                            }


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'postgres')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# Supabase Constants
SUPABASE_URL                    =   config('SUPABASE_URL', default = 'http://localhost:54321')
SUPABASE_ANON_KEY               =   config('SUPABASE_ANON_KEY', default = '')
SUPABASE_SERVICE_ROLE_KEY       =   config('SUPABASE_SERVICE_ROLE_KEY', default = '')
HTTP_TIMEOUT_SECONDS            =   config('HTTP_TIMEOUT_SECONDS', default = 10.0, cast = float)


# Object Storage Constants (S3 protocol)
STORAGE_ENDPOINT_URL            =   config('STORAGE_ENDPOINT_URL', default = '')
STORAGE_ACCESS_KEY_ID           =   config('STORAGE_ACCESS_KEY_ID', default = '')
STORAGE_SECRET_ACCESS_KEY       =   config('STORAGE_SECRET_ACCESS_KEY', default = '')
STORAGE_REGION                  =   config('STORAGE_REGION', default = 'auto')

BUCKET_GIRLS_MEDIA              =   "girls-media"
BUCKET_TMP_UPLOADS              =   "tmp-uploads"
BUCKET_CHAT_IMAGES              =   "chat-images"
SIGNED_URL_BUCKETS              =   (BUCKET_GIRLS_MEDIA, BUCKET_TMP_UPLOADS)


# Cloudflare Stream Constants
CF_ACCOUNT_ID                   =   config('CF_ACCOUNT_ID', default = '')
CF_STREAM_TOKEN                 =   config('CF_STREAM_TOKEN', default = '')
CF_API_BASE_URL                 =   "https://api.cloudflare.com/client/v4"


# Admin Roles
ROLE_SUPERADMIN                 =   "superadmin"
ROLE_ADMIN                      =   "admin"
ROLE_FINANCE                    =   "finance"
ROLE_SUPPORT                    =   "support"

ADMIN_ROLES                     =   (ROLE_SUPERADMIN, ROLE_ADMIN, ROLE_FINANCE, ROLE_SUPPORT)
SUPERADMIN_ONLY                 =   (ROLE_SUPERADMIN,)
MODERATION_ROLES                =   (ROLE_SUPERADMIN, ROLE_ADMIN)
FINANCE_ROLES                   =   (ROLE_SUPERADMIN, ROLE_ADMIN, ROLE_FINANCE)
SUPPORT_ROLES                   =   (ROLE_SUPERADMIN, ROLE_ADMIN, ROLE_SUPPORT)


# Paging
DEFAULT_PAGE_SIZE               =   20
MAX_PAGE_SIZE                   =   100
MONITORING_PAGE_SIZE            =   50
ADMIN_LOG_LIMIT                 =   50
PENDING_ITEMS_LIMIT             =   10


# Orders
ORDER_STATUSES                  =   ("pending", "confirmed", "en_route", "arrived", "in_service", "completed", "cancelled")
ORDER_ACTIVE_STATUSES           =   ("confirmed", "en_route", "arrived", "in_service")
ORDER_UPGRADABLE_STATUSES       =   ("pending", "confirmed", "en_route", "arrived", "in_service")
PENDING_OVERTIME_MINUTES        =   10


# Finance
FINANCE_TIMEZONE                =   "Asia/Bangkok"
FINANCE_DAY_START_HOUR          =   6
SETTLEMENT_STATUSES             =   ("pending", "settled", "rejected")
TRANSACTION_TYPES               =   ("deposit", "payment", "withdrawal", "adjustment")
TRANSACTION_APPROVAL_STATUSES   =   ("pending", "approved", "rejected")
PAYMENT_CONTENT_TYPES           =   ("deposit", "full_amount", "tip", "other")
PAYMENT_METHODS                 =   ("wechat", "alipay", "thb_bank_transfer", "credit_card", "cash", "other")
PAYMENT_NOTES_MAX_LENGTH        =   1000


# Media
MEDIA_STATUSES                  =   ("pending", "approved", "rejected")
MEDIA_KINDS                     =   ("image", "video", "live_photo")
MEDIA_MAX_PER_GIRL              =   30
MIN_USER_LEVEL                  =   0
MAX_USER_LEVEL                  =   10
SIGNED_URL_DEFAULT_EXPIRES      =   3600
SIGNED_URL_MIN_EXPIRES          =   60
SIGNED_URL_MAX_EXPIRES          =   86400


# Chats
CHAT_THREAD_TYPES               =   ("c2g", "s2c", "s2g")
CHAT_ACTIVE_HOURS               =   24
CHAT_MESSAGE_RETENTION_DAYS     =   90
CHAT_INVALID_THREAD_DAYS        =   30
CHAT_CLEANUP_BATCH_SIZE         =   50


# Reviews & Reports
REVIEW_STATUSES                 =   ("pending", "approved", "rejected")
REVIEW_RATINGS                  =   (1, 2, 3, 4, 5)
REPORT_STATUSES                 =   ("pending", "resolved")
REPORTER_ROLES                  =   ("customer", "girl")
ADMIN_NOTES_MAX_LENGTH          =   1000


# Service Catalogue
CODE_PATTERN                    =   r"^[a-zA-Z0-9_-]+$"
SERVICE_CODE_MAX_LENGTH         =   50
SERVICE_BADGES                  =   ("TOP_PICK", "HOT", "NEW")
SERVICE_SORT_COLUMNS            =   ("created_at", "updated_at", "total_sales", "sort_order")
SERVICE_DURATION_MINUTES        =   (30, 60, 90, 120, 150, 180, 240, 300, 360, 480)
SERVICE_PRICE_MIN               =   100
SERVICE_PRICE_MAX               =   50000
SERVICE_PRICE_STEP              =   100
SORT_ORDER_MAX                  =   9999
DEFAULT_SORT_ORDER              =   999
BIND_STATUSES                   =   ("all", "bound-enabled", "bound-disabled", "unbound")
BIND_SORT_COLUMNS               =   ("girl_number", "name", "created_at")
BIND_NOTES_MAX_LENGTH           =   500


# Therapists
GIRL_STATUSES                   =   ("available", "busy", "offline")
GIRL_MAX_COOLDOWN_HOURS         =   72
GIRL_USERNAME_MIN_LENGTH        =   3
GIRL_USERNAME_MAX_LENGTH        =   50
GIRL_NAME_MAX_LENGTH            =   50
GIRL_MEASUREMENTS_MAX_LENGTH    =   15
GIRL_BADGES                     =   ("new", "hot", "top_rated")
GIRL_GENDERS                    =   (0, 1)
GIRL_LANGUAGES                  =   ("EN_Base", "EN", "ZH_Base", "ZH", "TH_Base", "TH",
                                     "KO_Base", "KO", "YUE_Base", "YUE", "JA_Base", "JA")
GIRL_SORT_COLUMNS               =   ("created_at", "updated_at", "rating", "total_sales", "trust_score", "sort_order")
GIRL_DEFAULT_TRUST_SCORE        =   80


# Attendance
ATTENDANCE_DEFAULT_DAYS         =   7
ATTENDANCE_SORT_COLUMNS         =   ("girl_number", "online_seconds", "order_count",
                                     "order_duration_seconds", "booking_rate_percent")
ATTENDANCE_RATINGS              =   ((60, "excellent"), (40, "good"), (20, "average"), (0, "poor"))


# City Panels
CBODY_PANEL_CITY_ID             =   config('CBODY_PANEL_CITY_ID', default = 1, cast = int)
CITY_PANELS                     =   {
                                        "aloha": {"display_name": "AlohaAdmin", "city_code": "CNX"},
                                        "cbody": {"display_name": "cbodyAdmin", "city_id": CBODY_PANEL_CITY_ID,
                                                  "sort_order": 998}
                                    }
PANEL_STATUSES                  =   ("available", "busy")
PANEL_MAX_BUSY_MINUTES          =   1440


# Customers
USER_LANGUAGES                  =   ("en", "zh", "th")


# Fare Config
FARE_CONFIG_NAMESPACE           =   "fare"
FARE_CONFIG_KEY                 =   "params.v1"
FARE_CONFIG_SCOPE               =   "app"
FARE_CONFIG_SCOPE_ID            =   "cbody"


# Partner API
PARTNER_MIN_SORT_ORDER          =   998
PARTNER_DEFAULT_PER_MINUTE      =   100
PARTNER_DEFAULT_PER_HOUR        =   1000
PARTNER_IP_PER_HOUR             =   1000
API_KEY_PREFIX                  =   "cbody_"
API_KEY_LENGTH                  =   32
