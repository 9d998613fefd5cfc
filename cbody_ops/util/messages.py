""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    # Admins
    "ADMIN_CREATED"             :   "Admin created successfully.",
    "ADMIN_UPDATED"             :   "Admin updated successfully.",
    "ADMIN_STATUS_CHANGED"      :   "Admin is now {}.",
    "PASSWORD_RESET"            :   "Password reset successfully.",
    "NOTHING_CHANGED"           :   "Nothing changed.",

    # Users
    "USER_UPDATED"              :   "User updated successfully.",
    "USER_BANNED"               :   "User banned.",
    "USER_UNBANNED"             :   "User unbanned.",

    # Therapists
    "COOLDOWN_SET"              :   "Cooldown set.",
    "COOLDOWN_CANCELLED"        :   "Cooldown cancelled.",
    "GIRL_UPDATED"              :   "Therapist updated successfully.",
    "GIRL_CREATED"              :   "Therapist created successfully.",
    "GIRL_STATUS_UPDATED"       :   "Therapist status updated.",

    # Service Catalogue
    "SERVICE_CREATED"           :   "Service created successfully.",
    "SERVICE_UPDATED"           :   "Service updated successfully.",
    "DURATION_CREATED"          :   "Duration created successfully.",
    "DURATION_UPDATED"          :   "Duration updated successfully.",
    "DURATION_DELETED"          :   "Duration deleted.",
    "GIRLS_BOUND"               :   "{} therapist(s) bound.",
    "GIRLS_UNBOUND"             :   "{} therapist(s) unbound.",
    "GIRLS_RESTORED"            :   "{} therapist(s) restored.",

    # City Panels
    "PANEL_STATUS_CHANGED"      :   "Therapist is now {}.",

    # Orders
    "ORDER_UPGRADED"            :   "Order upgraded successfully.",

    # Finance
    "SETTLEMENT_UPDATED"        :   "Settlement updated successfully.",
    "SETTLEMENT_SETTLED"        :   "Settlement marked as settled.",
    "SETTLEMENT_REJECTED"       :   "Settlement rejected.",
    "DEPOSIT_UPDATED"           :   "Deposit updated successfully.",
    "TRANSACTION_APPROVED"      :   "Transaction approved.",
    "TRANSACTION_REJECTED"      :   "Transaction rejected.",

    # Media
    "MEDIA_APPROVED"            :   "Media approved.",
    "MEDIA_REJECTED"            :   "Media rejected.",
    "MEDIA_DELETED"             :   "Media deleted.",
    "MEDIA_REORDERED"           :   "Media order saved.",
    "MEDIA_UPDATED"             :   "Media updated successfully.",
    "MEDIA_RESTORED"            :   "Media moved back to pending.",
    "BATCH_DONE"                :   "{} item(s) processed.",
    "BATCH_PARTIAL"             :   "{} item(s) processed, {} failed.",

    # Chats
    "THREAD_LOCKED"             :   "Thread locked.",
    "THREAD_UNLOCKED"           :   "Thread unlocked.",
    "THREAD_DELETED"            :   "Thread deleted.",
    "CHAT_CLEANUP_DONE"         :   "Cleanup finished.",
    "NOTHING_TO_CLEAN"          :   "Nothing to clean up.",

    # Reviews & Reports
    "REVIEW_APPROVED"           :   "Review approved.",
    "REVIEW_REJECTED"           :   "Review rejected.",
    "REVIEW_UPDATED"            :   "Review updated successfully.",
    "REPORT_RESOLVED"           :   "Report resolved.",

    # Configs
    "CONFIG_UPDATED"            :   "Config updated successfully."
}


# ERROR MESSAGES
ERROR = {
    # Auth Errors
    "AUTH_TOKEN_MISSING"        :   "Authorization token is required.",
    "AUTH_TOKEN_INVALID"        :   "Session is invalid or expired. Please sign in again.",
    "NOT_ADMIN"                 :   "This account has no back office access.",
    "ADMIN_DISABLED"            :   "This admin account is disabled.",
    "INSUFFICIENT_ROLE"         :   "Your role is not allowed to perform this action.",
    "INVALID_EMAIL"             :   "A valid email is required.",
    "PASSWORD_REQUIRED"         :   "Password is required.",

    # Admin Errors
    "DISPLAY_NAME_REQUIRED"     :   "Display name is required.",
    "DISPLAY_NAME_TOO_LONG"     :   "Display name must be at most {} characters.",
    "PASSWORD_TOO_SHORT"        :   "Password must be at least {} characters.",
    "INVALID_ROLE"              :   "Role must be one of superadmin, admin, finance, support.",
    "ADMIN_CREATE_FAILED"       :   "Unable to create admin.",
    "ADMIN_NOT_FOUND"           :   "Admin not found.",
    "ADMIN_UPDATE_FAILED"       :   "Unable to update admin.",
    "CANNOT_DISABLE_SELF"       :   "You cannot disable your own account.",

    # Generic Field Errors
    "NO_FIELDS_TO_UPDATE"       :   "No fields to update.",
    "FIELD_REQUIRED"            :   "{} is required.",
    "INVALID_TEXT_LENGTH"       :   "{} must be between {} and {} characters.",
    "INVALID_RANGE"             :   "{} must be between {} and {}.",
    "INVALID_BOOLEAN"           :   "{} must be true or false.",
    "INVALID_NUMBER"            :   "{} must be a number.",
    "INVALID_LANGUAGE"          :   "Language must be one of en, zh, th.",
    "INVALID_DATE"              :   "Dates must be ISO 8601.",
    "INVALID_DATE_RANGE"        :   "Start date must be before end date.",
    "REASON_REQUIRED"           :   "A reason is required.",

    # User Errors
    "USER_NOT_FOUND"            :   "User not found.",
    "USER_UPDATE_FAILED"        :   "Unable to update user.",

    # Therapist Errors
    "GIRL_NOT_FOUND"            :   "Therapist not found.",
    "GIRL_ID_REQUIRED"          :   "Therapist ID is required.",
    "INVALID_COOLDOWN_HOURS"    :   "Cooldown must be more than 0 and at most {} hours.",
    "COOLDOWN_UPDATE_FAILED"    :   "Unable to update cooldown.",
    "GIRL_UPDATE_FAILED"        :   "Unable to update therapist.",
    "GIRL_CREATE_FAILED"        :   "Unable to create therapist.",
    "GIRL_NUMBER_TAKEN"         :   "Therapist number {} is already in use.",
    "USERNAME_TAKEN"            :   "Username {} is already in use.",
    "INVALID_CODE"              :   "{} may only contain letters, digits, underscores and hyphens.",
    "INVALID_CHOICE"            :   "{} must be one of {}.",
    "LOCALIZED_TEXT_REQUIRED"   :   "{} needs text in at least one of en, zh, th.",
    "INVALID_LIST"              :   "{} must be a list.",
    "INVALID_URL"               :   "{} must be an http(s) URL.",
    "INVALID_DATE_VALUE"        :   "{} must be a date (YYYY-MM-DD).",
    "CITY_NOT_FOUND"            :   "City not found.",
    "CATEGORY_NOT_FOUND"        :   "Category not found.",
    "CATEGORIES_REQUIRED"       :   "category_ids must list at least one category.",
    "STATUS_UPDATE_FAILED"      :   "Unable to update therapist status.",
    "INVALID_SORT_BY"           :   "sort_by must be one of {}.",

    # Service Catalogue Errors
    "SERVICE_NOT_FOUND"         :   "Service not found.",
    "SERVICE_CODE_TAKEN"        :   "Service code {} is already in use.",
    "SERVICE_UPDATE_FAILED"     :   "Unable to save service.",
    "DURATION_NOT_FOUND"        :   "Duration not found.",
    "DURATION_TAKEN"            :   "This service already has a {} minute duration.",
    "INVALID_PRICE"             :   "{} must be a multiple of {} between {} and {}.",
    "INVALID_PRICE_ORDER"       :   "Prices must satisfy min_price <= default_price <= max_price.",
    "GIRL_IDS_REQUIRED"         :   "girl_ids must be a non-empty list.",
    "INVALID_BIND_STATUS"       :   "bind_status must be one of all, bound-enabled, bound-disabled, unbound.",
    "NOTES_REQUIRED"            :   "Notes are required.",
    "BINDING_UPDATE_FAILED"     :   "Unable to update service bindings.",

    # City Panel Errors
    "PANEL_NOT_FOUND"           :   "Unknown panel.",
    "PANEL_FORBIDDEN"           :   "This account cannot use the {} panel.",
    "PANEL_CITY_NOT_CONFIGURED" :   "The panel city is not configured.",
    "GIRL_NOT_IN_PANEL"         :   "Therapist is not listed on this panel.",
    "GIRL_OFFLINE"              :   "Therapist is offline.",
    "INVALID_BUSY_MINUTES"      :   "minutes must be a whole number between 1 and {}.",

    # Order Errors
    "INVALID_ORDER_STATUS"      :   "Invalid order status.",
    "ORDER_NOT_FOUND"           :   "Order not found.",
    "CUSTOM_RANGE_REQUIRED"     :   "start_date and end_date are required for a custom range.",
    "INVALID_TIME_RANGE"        :   "time_range must be one of today, 3days, 7days, custom.",
    "ORDER_NOT_UPGRADABLE"      :   "An order in status '{}' cannot be upgraded.",
    "SETTLEMENT_LOCKED"         :   "The order's settlement is no longer pending.",
    "INVALID_UPGRADE_TARGET"    :   "The selected service is not an available upgrade for this order.",
    "ORDER_UPGRADE_FAILED"      :   "Unable to upgrade order.",
    "SERVICE_DURATION_REQUIRED" :   "service_duration_id must be a positive integer.",

    # Finance Errors
    "INVALID_SETTLEMENT_STATUS" :   "Invalid settlement status.",
    "SETTLEMENT_NOT_FOUND"      :   "Settlement not found.",
    "ALREADY_SETTLED"           :   "Settlement is already settled.",
    "SETTLEMENT_NOT_PENDING"    :   "Only pending settlements can be changed.",
    "SETTLEMENT_UPDATE_FAILED"  :   "Unable to update settlement.",
    "INVALID_AMOUNT"            :   "{} must be a non-negative amount.",
    "ACCOUNT_NOT_FOUND"         :   "Settlement account not found.",
    "DEPOSIT_UPDATE_FAILED"     :   "Unable to update deposit.",
    "INVALID_TRANSACTION_TYPE"  :   "Invalid transaction type.",
    "INVALID_APPROVAL_STATUS"   :   "Invalid approval status.",
    "TRANSACTION_NOT_FOUND"     :   "Transaction not found.",
    "TRANSACTION_NOT_PENDING"   :   "Only pending transactions can be approved or rejected.",
    "TRANSACTION_APPROVE_FAILED":   "Unable to approve transaction.",
    "TRANSACTION_REJECT_FAILED" :   "Unable to reject transaction.",
    "INVALID_PAYMENT_CONTENT_TYPE": "Invalid payment content type.",
    "INVALID_PAYMENT_METHOD"    :   "Invalid payment method.",

    # Media Errors
    "INVALID_MEDIA_STATUS"      :   "Invalid media status.",
    "MEDIA_NOT_FOUND"           :   "Media not found.",
    "MEDIA_ALREADY_APPROVED"    :   "Media is already approved.",
    "MEDIA_ALREADY_REJECTED"    :   "Media is already rejected.",
    "MEDIA_LIMIT_REACHED"       :   "Therapist already has {} approved media.",
    "MEDIA_APPROVE_FAILED"      :   "Unable to approve media.",
    "MEDIA_FILE_MISSING"        :   "Media has no file to publish.",
    "MEDIA_LIVE_PHOTO_INCOMPLETE" : "Live photo is missing its image or video.",
    "MEDIA_UPDATE_FAILED"       :   "Unable to update media.",
    "MEDIA_NOT_OWNED"           :   "Some media do not belong to this therapist.",
    "MEDIA_NOT_APPROVED"        :   "Only approved media can be changed.",
    "MEDIA_NOT_REJECTED"        :   "Only rejected media can be restored.",
    "IDS_REQUIRED"              :   "ids must be a non-empty list.",
    "REORDER_ITEMS_REQUIRED"    :   "items must be a non-empty list of id and sort_order pairs.",
    "INVALID_SORT_ORDER"        :   "sort_order must be a non-negative integer.",
    "STORAGE_KEY_REQUIRED"      :   "Storage key is required.",
    "INVALID_BUCKET"            :   "Signed URLs are not available for this bucket.",

    # Chat Errors
    "INVALID_THREAD_TYPE"       :   "thread_type must be one of c2g, s2c, s2g.",
    "THREAD_NOT_FOUND"          :   "Chat thread not found.",
    "THREAD_UPDATE_FAILED"      :   "Unable to update chat thread.",
    "THREAD_DELETE_FAILED"      :   "Unable to delete chat thread.",
    "CHAT_CLEANUP_FAILED"       :   "Chat cleanup failed.",

    # Review & Report Errors
    "INVALID_REVIEW_STATUS"     :   "Invalid review status.",
    "INVALID_RATING"            :   "Rating must be between 1 and 5.",
    "REVIEW_NOT_FOUND"          :   "Review not found.",
    "REVIEW_NOT_PENDING"        :   "Review is already {}.",
    "REVIEW_UPDATE_FAILED"      :   "Unable to update review.",
    "INVALID_REPORT_STATUS"     :   "Invalid report status.",
    "INVALID_REPORTER_ROLE"     :   "reporter_role must be customer or girl.",
    "REPORT_NOT_FOUND"          :   "Report not found.",
    "REPORT_NOT_PENDING"        :   "Only pending reports can be resolved.",
    "REPORT_UPDATE_FAILED"      :   "Unable to update report.",

    # Config Errors
    "FARE_CONFIG_NOT_FOUND"     :   "Fare config not found.",
    "FARE_PARAMS_REQUIRED"      :   "Fare parameters are required.",
    "CONFIG_UPDATE_FAILED"      :   "Unable to update config.",

    # Partner API Errors
    "API_KEY_MISSING"           :   "Missing API key. Use Authorization: Bearer <api_key> or ?api_key=<api_key>",
    "API_KEY_INVALID"           :   "Invalid API key.",
    "API_KEY_INACTIVE"          :   "API key is inactive.",
    "RATE_LIMIT_EXCEEDED"       :   "Rate limit exceeded.",
    "IP_RATE_LIMIT_EXCEEDED"    :   "IP rate limit exceeded."
}
