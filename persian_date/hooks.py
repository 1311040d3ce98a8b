app_name = "persian_date"
app_title = "Persian Date"
app_publisher = "Persian Date Contributors"
app_description = "Persian (Jalali) and Gregorian date conversion for Frappe apps, with paired date field syncing."
app_email = "maintainers@example.com"
app_license = "MIT"

# Assets
app_include_js = [
    "assets/persian_date/js/persian_datepicker.bundle.js",
]

# Boot
boot_session = "persian_date.boot.boot_session"

# Document Events
doc_events = {
    "*": {
        "validate": "persian_date.api.fields.sync_document_dates",
    },
}

# Paired date fields, doctype -> [(persian_field, gregorian_field), ...]
persian_date_field_pairs = {
    "Employee": [
        ("birth_date_shamsi", "date_of_birth"),
        ("contract_start_shamsi", "date_of_joining"),
    ],
}
