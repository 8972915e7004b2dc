"""AUS CMS: admin authentication and founder profile API"""
