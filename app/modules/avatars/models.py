# Supabase storage bucket: avatars
# Supabase table: user_profiles
# This file documents the expected storage and database layout
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase storage layout:

avatars (public bucket):
- object key: "{user_id}.{ext}" where ext is the text after the last "." of the
  uploaded filename (the whole filename when it has no ".")
- uploads use upsert, so one object per user id per extension; changing the
  extension leaves the previous object in place

Expected Supabase table structure:

user_profiles:
- user_id: uuid (unique, references auth.users.id)
- avatar_url: text (nullable) - public URL of the latest uploaded avatar

Rows are not created here: an upload for a user without a profile row leaves the
table untouched.
"""
